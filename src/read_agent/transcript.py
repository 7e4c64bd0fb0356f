"""Conversation transcript with cumulative token tracking."""

from __future__ import annotations

from read_agent.models import Message, Usage


class Transcript:
    """Append-only message history for one conversation.

    Lives only for the duration of a single run; nothing is persisted.
    """

    def __init__(self) -> None:
        self._messages: list[Message] = []
        self._usage: Usage = Usage()

    def append(self, message: Message) -> None:
        """Append a message to the transcript."""
        self._messages.append(message)

    def record_usage(self, usage: Usage) -> None:
        """Accumulate token usage from a completion."""
        self._usage.input_tokens += usage.input_tokens
        self._usage.output_tokens += usage.output_tokens

    @property
    def messages(self) -> list[Message]:
        """Snapshot of the current message list."""
        return list(self._messages)

    @property
    def usage(self) -> Usage:
        """Cumulative token usage across all completions."""
        return Usage(
            input_tokens=self._usage.input_tokens,
            output_tokens=self._usage.output_tokens,
        )

    def __len__(self) -> int:
        return len(self._messages)
