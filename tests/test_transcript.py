"""Tests for src/read_agent/transcript.py."""

from __future__ import annotations

from read_agent.models import Message, Role, Usage
from read_agent.transcript import Transcript


class TestTranscript:
    def test_initial_state(self) -> None:
        t = Transcript()
        assert t.messages == []
        assert t.usage.total == 0
        assert len(t) == 0

    def test_append_keeps_order(self) -> None:
        t = Transcript()
        t.append(Message(role=Role.USER, content="Hello"))
        t.append(Message(role=Role.ASSISTANT, content="Hi"))
        assert [m.role for m in t.messages] == [Role.USER, Role.ASSISTANT]

    def test_messages_returns_copy(self) -> None:
        t = Transcript()
        t.append(Message(role=Role.USER, content="a"))
        snapshot = t.messages
        t.append(Message(role=Role.USER, content="b"))
        assert len(snapshot) == 1

    def test_record_usage_accumulates(self) -> None:
        t = Transcript()
        t.record_usage(Usage(input_tokens=100, output_tokens=50))
        t.record_usage(Usage(input_tokens=200, output_tokens=75))
        assert t.usage.input_tokens == 300
        assert t.usage.output_tokens == 125

    def test_usage_is_a_copy(self) -> None:
        t = Transcript()
        t.usage.input_tokens = 99
        assert t.usage.input_tokens == 0
