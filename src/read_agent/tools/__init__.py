"""Tools package: the Read tool and the executor that dispatches to it."""

from read_agent.tools.executor import TOOLS, ToolExecutor, ToolFn, get_tool_definitions
from read_agent.tools.read_file import READ_DEFINITION, read_file

__all__ = [
    "READ_DEFINITION",
    "TOOLS",
    "ToolExecutor",
    "ToolFn",
    "get_tool_definitions",
    "read_file",
]
