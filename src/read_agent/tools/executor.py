"""Tool executor: decodes tool-call arguments and dispatches to the tool function."""

import json
import logging
from collections.abc import Callable, Coroutine
from typing import Any

from read_agent.models import ToolCall, ToolDefinition, ToolResult
from read_agent.tools.read_file import READ_DEFINITION, read_file

logger = logging.getLogger(__name__)

# Type alias for an async tool function.
ToolFn = Callable[..., Coroutine[Any, Any, str]]

# Tool name -> implementation. Only file reading is offered to the model.
TOOLS: dict[str, ToolFn] = {READ_DEFINITION.name: read_file}


def get_tool_definitions() -> list[ToolDefinition]:
    """Return the schemas passed to the model with every request."""
    return [READ_DEFINITION]


class ToolExecutor:
    """Dispatches tool calls from the assistant to their implementations.

    Every failure (unknown tool, malformed arguments, I/O or decoding
    errors) comes back as a :class:`~read_agent.models.ToolResult` with
    ``is_error=True``; the failure kind is only logged.
    """

    def has_tool(self, name: str) -> bool:
        """Return True if *name* is a tool the executor can run."""
        return name in TOOLS

    async def execute(self, tool_call: ToolCall) -> ToolResult:
        """Execute a tool call.

        Args:
            tool_call: The tool invocation requested by the assistant.

        Returns:
            A :class:`~read_agent.models.ToolResult` with the tool's output or an
            error description.
        """
        fn = TOOLS.get(tool_call.name)
        if fn is None:
            logger.warning("Unknown tool requested: %s", tool_call.name)
            return self._error(tool_call, f"Error: unknown tool '{tool_call.name}'.")

        try:
            arguments = self._decode_arguments(tool_call.arguments)
        except ValueError as exc:
            logger.warning("Tool %s sent malformed arguments: %s", tool_call.name, exc)
            return self._error(
                tool_call,
                f"Error: invalid arguments for tool '{tool_call.name}': {exc}",
            )

        return await self._run_tool(tool_call, fn, arguments)

    @staticmethod
    def _decode_arguments(raw: str) -> dict[str, Any]:
        """Decode the JSON argument text of a tool call into a keyword dict.

        Raises:
            ValueError: If *raw* is not JSON or not a JSON object.
        """
        arguments = json.loads(raw) if raw else {}
        if not isinstance(arguments, dict):
            raise ValueError(f"expected a JSON object, got {type(arguments).__name__}")
        return arguments

    @staticmethod
    async def _run_tool(
        tool_call: ToolCall,
        fn: ToolFn,
        arguments: dict[str, Any],
    ) -> ToolResult:
        """Invoke the tool function and capture the result.

        Args:
            tool_call: The originating tool call (for ID/name tracking).
            fn: The async callable to invoke.
            arguments: Keyword arguments to pass to *fn*.

        Returns:
            The :class:`~read_agent.models.ToolResult`.
        """
        try:
            output: str = await fn(**arguments)
        except TypeError as exc:
            logger.warning("Tool %s called with bad arguments: %s", tool_call.name, exc)
            return ToolExecutor._error(
                tool_call,
                f"Error: invalid arguments for tool '{tool_call.name}': {exc}",
            )
        except (OSError, ValueError) as exc:
            # ValueError covers invalid UTF-8 and NUL bytes in the path.
            logger.warning("Tool %s failed: %s", tool_call.name, exc)
            return ToolExecutor._error(
                tool_call, f"Error: tool '{tool_call.name}' failed: {exc}"
            )
        return ToolResult(tool_call_id=tool_call.id, name=tool_call.name, output=output)

    @staticmethod
    def _error(tool_call: ToolCall, message: str) -> ToolResult:
        return ToolResult(
            tool_call_id=tool_call.id,
            name=tool_call.name,
            output=message,
            is_error=True,
        )
