"""OpenRouter provider adapter (OpenAI-compatible chat completions)."""

import logging
from typing import Any

from openai import AsyncOpenAI
from openai.types.chat import ChatCompletion

from read_agent.errors import ResponseFormatError
from read_agent.models import (
    DEFAULT_BASE_URL,
    Completion,
    FinalAnswer,
    Message,
    Role,
    ToolCall,
    ToolDefinition,
    ToolRequest,
    Usage,
)
from read_agent.providers.base import ProviderAdapter

logger = logging.getLogger(__name__)

_EXTRA_HEADERS = {
    "HTTP-Referer": "https://github.com/read-agent",
    "X-Title": "Read Agent",
}


class OpenRouterAdapter(ProviderAdapter):
    """Provider adapter for OpenRouter's OpenAI-compatible API.

    Args:
        api_key: OpenRouter API key (``OPENROUTER_API_KEY``).
        base_url: API root (``OPENROUTER_BASE_URL``).
    """

    def __init__(self, api_key: str, base_url: str = DEFAULT_BASE_URL) -> None:
        self._client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            default_headers=_EXTRA_HEADERS,
        )

    # ------------------------------------------------------------------
    # Message formatting
    # ------------------------------------------------------------------

    def format_messages(self, messages: list[Message]) -> list[dict[str, object]]:
        """Convert internal messages to OpenAI-compatible wire format.

        Assistant tool calls are echoed with their argument text untouched.

        Args:
            messages: Transcript.

        Returns:
            List of message dicts for the OpenAI ``messages`` parameter.
        """
        result: list[dict[str, object]] = []
        for msg in messages:
            if msg.role == Role.TOOL:
                result.append(
                    {
                        "role": "tool",
                        "content": msg.content,
                        "tool_call_id": msg.tool_call_id or "",
                    }
                )
            elif msg.role == Role.ASSISTANT and msg.tool_calls:
                result.append(
                    {
                        "role": "assistant",
                        "content": msg.content,
                        "tool_calls": [
                            {
                                "id": tc.id,
                                "type": "function",
                                "function": {"name": tc.name, "arguments": tc.arguments},
                            }
                            for tc in msg.tool_calls
                        ],
                    }
                )
            else:
                result.append({"role": msg.role.value, "content": msg.content})
        return result

    def format_tools(self, tools: list[ToolDefinition]) -> list[dict[str, object]]:
        """Convert tool definitions to OpenAI function-calling schema.

        Returns:
            List of tool dicts in ``{"type": "function", "function": {...}}`` format.
        """
        return [
            {
                "type": "function",
                "function": {
                    "name": tool.name,
                    "description": tool.description,
                    "parameters": tool.parameters,
                },
            }
            for tool in tools
        ]

    # ------------------------------------------------------------------
    # Completion
    # ------------------------------------------------------------------

    async def complete(
        self,
        messages: list[Message],
        tools: list[ToolDefinition],
        model: str,
    ) -> Completion:
        """Request a (non-streaming) completion from OpenRouter.

        Transport and HTTP errors raised by the ``openai`` client propagate
        unchanged.

        Args:
            messages: Full transcript.
            tools: Available tools for the model.
            model: OpenRouter model string (e.g. ``"anthropic/claude-haiku-4.5"``).

        Returns:
            The decoded first choice.

        Raises:
            ResponseFormatError: If the response carries no choices.
        """
        kwargs: dict[str, Any] = {
            "model": model,
            "messages": self.format_messages(messages),
        }
        if tools:
            kwargs["tools"] = self.format_tools(tools)

        raw = await self._client.chat.completions.create(**kwargs)
        completion: ChatCompletion = raw
        return self._decode(completion)

    @staticmethod
    def _decode(completion: ChatCompletion) -> Completion:
        """Turn the first choice of *completion* into a typed :class:`Completion`.

        Tool calls without a ``function`` payload (e.g. custom tool calls)
        are logged and left out of the stored message, so they are not
        echoed back on the next request. If that leaves no calls the turn
        is a :class:`FinalAnswer` and the conversation ends, rather than
        sending another request that carries the unusable call.
        """
        if not completion.choices:
            raise ResponseFormatError("Response contained no choices")

        choice = completion.choices[0]
        wire_message = choice.message

        tool_calls: list[ToolCall] = []
        for wire_call in wire_message.tool_calls or []:
            function = getattr(wire_call, "function", None)
            if function is None:
                logger.warning("Tool call ID %s function parse failed", wire_call.id)
                continue
            tool_calls.append(
                ToolCall(id=wire_call.id, name=function.name, arguments=function.arguments)
            )

        message = Message(
            role=Role.ASSISTANT,
            content=wire_message.content,
            tool_calls=tool_calls,
        )

        finish_reason = choice.finish_reason
        if finish_reason == "stop" or not tool_calls:
            reply: FinalAnswer | ToolRequest = FinalAnswer(text=message.content)
        else:
            reply = ToolRequest(calls=list(tool_calls))

        usage = Usage()
        if completion.usage:
            usage = Usage(
                input_tokens=completion.usage.prompt_tokens,
                output_tokens=completion.usage.completion_tokens,
            )

        logger.debug(
            "decoded completion: finish_reason=%s, tool_calls=%d",
            finish_reason,
            len(tool_calls),
        )
        return Completion(
            message=message,
            finish_reason=finish_reason,
            reply=reply,
            choice_count=len(completion.choices),
            usage=usage,
        )
