"""Providers package: factory function to get the configured provider adapter."""

from read_agent.models import Config
from read_agent.providers.base import ProviderAdapter
from read_agent.providers.openrouter import OpenRouterAdapter


def get_provider(config: Config) -> ProviderAdapter:
    """Return the appropriate provider adapter for the given config.

    Args:
        config: Agent runtime configuration.

    Returns:
        A :class:`~read_agent.providers.base.ProviderAdapter` instance.

    Raises:
        ValueError: If the provider in *config* is not recognised.
    """
    if config.provider == "openrouter":
        return OpenRouterAdapter(api_key=config.api_key, base_url=config.base_url)
    raise ValueError(f"Unknown provider: {config.provider!r}")


__all__ = ["ProviderAdapter", "get_provider"]
