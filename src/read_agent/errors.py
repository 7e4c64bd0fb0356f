"""Exception hierarchy for the read agent."""

from __future__ import annotations


class AgentError(Exception):
    """Base for all read-agent errors."""


class ResponseFormatError(AgentError):
    """The chat-completion response did not have the expected shape."""
