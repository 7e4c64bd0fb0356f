"""Configuration loader: reads TOML defaults then applies env-var overrides."""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path

from read_agent.models import DEFAULT_BASE_URL, DEFAULT_MODEL, Config

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "default.toml"


def load_config(config_path: Path | None = None) -> Config:
    """Load agent configuration from TOML files with env-var overrides.

    Resolution order (later wins):
    1. Built-in defaults (model ``anthropic/claude-haiku-4.5``, OpenRouter URL)
    2. ``config/default.toml`` if present
    3. Values in *config_path* (if provided)
    4. Environment variables: ``OPENROUTER_API_KEY``, ``OPENROUTER_BASE_URL``,
       ``AGENT_MODEL``, ``AGENT_MAX_ITERATIONS``

    Args:
        config_path: Optional path to an additional TOML config file.

    Returns:
        Populated :class:`~read_agent.models.Config` instance.

    Raises:
        FileNotFoundError: If *config_path* is given but does not exist.
        ValueError: If the API key is missing or a value is invalid.
    """
    data: dict[str, object] = {}

    if _DEFAULT_CONFIG_PATH.exists():
        with _DEFAULT_CONFIG_PATH.open("rb") as fh:
            data.update(tomllib.load(fh))
        logger.debug("Loaded default config from %s", _DEFAULT_CONFIG_PATH)

    if config_path is not None:
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        with config_path.open("rb") as fh:
            data.update(tomllib.load(fh))
        logger.debug("Overlaid config from %s", config_path)

    if base_url_env := os.environ.get("OPENROUTER_BASE_URL"):
        data["base_url"] = base_url_env

    if model_env := os.environ.get("AGENT_MODEL"):
        data["model"] = model_env

    if max_iterations_env := os.environ.get("AGENT_MAX_ITERATIONS"):
        data["max_iterations"] = max_iterations_env

    # The key is only ever taken from the environment.
    api_key = os.environ.get("OPENROUTER_API_KEY", "")
    if not api_key:
        raise ValueError("OPENROUTER_API_KEY is not set")

    return Config(
        api_key=api_key,
        model=str(data.get("model") or DEFAULT_MODEL),
        base_url=str(data.get("base_url") or DEFAULT_BASE_URL),
        provider=str(data.get("provider", "openrouter")),
        max_iterations=_parse_max_iterations(data.get("max_iterations")),
        report_tool_errors=_parse_flag(data, "report_tool_errors"),
        execute_all_tool_calls=_parse_flag(data, "execute_all_tool_calls"),
    )


def _parse_max_iterations(value: object) -> int | None:
    """Normalise the iteration cap; 0 or absent means unbounded."""
    if value is None or value == "":
        return None
    try:
        limit = int(str(value))
    except ValueError:
        raise ValueError(f"max_iterations must be an integer, got {value!r}") from None
    if limit < 0:
        raise ValueError(f"max_iterations must not be negative, got {limit}")
    return limit or None


def _parse_flag(data: dict[str, object], key: str) -> bool:
    """Return a boolean setting; TOML strings such as ``"false"`` are rejected."""
    value = data.get(key, False)
    if not isinstance(value, bool):
        raise ValueError(f"{key} must be true or false, got {value!r}")
    return value
