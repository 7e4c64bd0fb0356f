"""Abstract base class for LLM provider adapters."""

from abc import ABC, abstractmethod

from read_agent.models import Completion, Message, ToolDefinition


class ProviderAdapter(ABC):
    """Interface that every LLM provider adapter must implement.

    Concrete subclasses wrap a specific API (e.g. OpenRouter) and handle
    message formatting and response decoding.
    """

    @abstractmethod
    def format_messages(self, messages: list[Message]) -> list[dict[str, object]]:
        """Convert internal :class:`~read_agent.models.Message` objects to the API wire format.

        Args:
            messages: Transcript in internal representation.

        Returns:
            List of dicts ready to send to the API.
        """

    @abstractmethod
    def format_tools(self, tools: list[ToolDefinition]) -> list[dict[str, object]]:
        """Convert :class:`~read_agent.models.ToolDefinition` objects to the API tool schema."""

    @abstractmethod
    async def complete(
        self,
        messages: list[Message],
        tools: list[ToolDefinition],
        model: str,
    ) -> Completion:
        """Request one chat completion and decode its first choice.

        Args:
            messages: Full transcript.
            tools: Available tools exposed to the model.
            model: Model identifier string.

        Returns:
            The decoded :class:`~read_agent.models.Completion`.
        """
