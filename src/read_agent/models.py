"""Shared dataclasses and enums for the read agent."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

DEFAULT_MODEL = "anthropic/claude-haiku-4.5"
DEFAULT_BASE_URL = "https://openrouter.ai/api/v1"


class Role(StrEnum):
    """Message role in a conversation."""

    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"


@dataclass(frozen=True)
class ToolCall:
    """A tool invocation requested by the assistant.

    Args:
        id: Identifier of this call, unique within one assistant turn.
        name: Name of the tool to invoke.
        arguments: JSON-encoded argument object, exactly as sent by the model.
    """

    id: str
    name: str
    arguments: str


@dataclass
class Message:
    """A single message in the transcript.

    Args:
        role: Who produced this message.
        content: Text content, or None when the model sent none.
        tool_call_id: For role=TOOL, the ID of the tool call being answered.
        tool_calls: For role=ASSISTANT, tool calls requested by the model.
    """

    role: Role
    content: str | None
    tool_call_id: str | None = None
    tool_calls: list[ToolCall] = field(default_factory=list)


@dataclass
class ToolResult:
    """The result of executing a tool.

    Args:
        tool_call_id: ID of the tool call this result corresponds to.
        name: Name of the tool that was executed.
        output: String output from the tool (or an error description).
        is_error: Whether the tool failed.
    """

    tool_call_id: str
    name: str
    output: str
    is_error: bool = False


@dataclass
class Usage:
    """Token usage for a single completion."""

    input_tokens: int = 0
    output_tokens: int = 0

    @property
    def total(self) -> int:
        """Total tokens consumed."""
        return self.input_tokens + self.output_tokens


@dataclass
class ToolDefinition:
    """Schema definition for a tool exposed to the model.

    Args:
        name: Tool name (used by the model to invoke it).
        description: Model-readable description of what the tool does.
        parameters: JSON Schema describing the tool's parameters.
    """

    name: str
    description: str
    parameters: dict[str, Any]


@dataclass(frozen=True)
class FinalAnswer:
    """The model finished; *text* is None if it sent no content."""

    text: str | None


@dataclass(frozen=True)
class ToolRequest:
    """The model asked for one or more tool calls."""

    calls: list[ToolCall]


Reply = FinalAnswer | ToolRequest


@dataclass
class Completion:
    """The decoded first choice of a chat-completion response.

    Args:
        message: The assistant message, ready to append to the transcript.
        finish_reason: Why generation stopped (``"stop"``, ``"tool_calls"``...).
        reply: Typed view of what the model wants next.
        choice_count: How many choices the API returned.
        usage: Token usage reported for the request.
    """

    message: Message
    finish_reason: str | None
    reply: Reply
    choice_count: int = 1
    usage: Usage = field(default_factory=Usage)


@dataclass
class Config:
    """Runtime configuration for the agent.

    Args:
        api_key: API key for the provider.
        model: Model string (e.g., 'anthropic/claude-haiku-4.5').
        base_url: Base URL of the OpenAI-compatible API.
        provider: Provider identifier (e.g., 'openrouter').
        max_iterations: Cap on requests per conversation; None means unbounded.
        report_tool_errors: Send failed tool results back to the model
            instead of dropping them.
        execute_all_tool_calls: Run every tool call of an assistant turn
            instead of only the first.
    """

    api_key: str
    model: str = DEFAULT_MODEL
    base_url: str = DEFAULT_BASE_URL
    provider: str = "openrouter"
    max_iterations: int | None = None
    report_tool_errors: bool = False
    execute_all_tool_calls: bool = False
