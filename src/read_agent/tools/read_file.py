"""Read tool: returns the content of a file from the filesystem."""

from __future__ import annotations

import logging

from read_agent.models import ToolDefinition

logger = logging.getLogger(__name__)

READ_DEFINITION = ToolDefinition(
    name="Read",
    description="Read and return the contents of a file",
    parameters={
        "type": "object",
        "properties": {
            "file_path": {
                "type": "string",
                "description": "The path to the file to read",
            }
        },
        "required": ["file_path"],
    },
)


async def read_file(file_path: str) -> str:
    """Read a whole file as UTF-8 text.

    Line endings are left untouched so the result matches the file exactly.
    Any path the process can reach is allowed.

    Args:
        file_path: Absolute or relative path to the file.

    Returns:
        The file contents.

    Raises:
        TypeError: If *file_path* is not a string.
        OSError: If the file is missing, unreadable or a directory.
        UnicodeDecodeError: If the contents are not valid UTF-8.
        ValueError: If *file_path* contains a NUL byte.
    """
    if not isinstance(file_path, str):
        raise TypeError(f"file_path must be a string, got {type(file_path).__name__}")
    with open(file_path, encoding="utf-8", newline="") as fh:
        content = fh.read()
    logger.debug("read_file: read %d chars from %s", len(content), file_path)
    return content

