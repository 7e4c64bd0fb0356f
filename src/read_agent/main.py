"""Entry point: parses CLI arguments, loads config, runs one conversation."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    """Configure root logger.

    Args:
        verbose: If True, set level to DEBUG; otherwise WARNING.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main() -> None:
    """CLI entry point for the read agent."""
    parser = argparse.ArgumentParser(
        prog="read-agent",
        description="Ask a model a question; it may read local files to answer.",
    )
    parser.add_argument(
        "-p",
        "--prompt",
        required=True,
        help="Prompt to send to the model.",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        help="Path to a TOML config file (overrides default.toml).",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Suppress progress notices on stderr.",
    )
    args = parser.parse_args()
    if not args.prompt.strip():
        parser.error("--prompt must not be empty")

    _setup_logging(args.verbose)

    # Lazy imports so startup is fast when --help is used.
    from openai import OpenAIError
    from rich.console import Console

    from read_agent.config import load_config
    from read_agent.errors import AgentError
    from read_agent.loop import run_conversation
    from read_agent.providers import get_provider
    from read_agent.tools import ToolExecutor
    from read_agent.transcript import Transcript

    config_path = Path(args.config) if args.config else None

    try:
        config = load_config(config_path=config_path)
    except (ValueError, FileNotFoundError) as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        sys.exit(1)

    provider = get_provider(config)
    console = Console(stderr=True, quiet=args.quiet)

    try:
        answer = asyncio.run(
            run_conversation(
                prompt=args.prompt,
                transcript=Transcript(),
                provider=provider,
                tool_executor=ToolExecutor(),
                config=config,
                console=console,
            )
        )
    except (OpenAIError, AgentError) as exc:
        logger.debug("Conversation aborted", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    if answer is not None:
        print(answer)


if __name__ == "__main__":
    main()
