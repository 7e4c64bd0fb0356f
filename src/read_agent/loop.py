"""Agent loop: request → inspect → run the requested tool → repeat."""

import logging

from rich.console import Console

from read_agent.models import Config, FinalAnswer, Message, Role
from read_agent.providers.base import ProviderAdapter
from read_agent.tools import ToolExecutor, get_tool_definitions
from read_agent.transcript import Transcript

logger = logging.getLogger(__name__)


async def run_conversation(
    prompt: str,
    transcript: Transcript,
    provider: ProviderAdapter,
    tool_executor: ToolExecutor,
    config: Config,
    console: Console | None = None,
) -> str | None:
    """Drive one conversation until the model gives a final answer.

    Appends the user prompt to *transcript*, then loops:

    1. Send the whole transcript plus the tool schema to the provider.
    2. Append the assistant message from the first choice.
    3. Stop if the model finished (``finish_reason == "stop"``) or asked for
       no tools; otherwise run the first tool call (every call when
       ``config.execute_all_tool_calls`` is set) and append its result.

    Failed tool calls add nothing to the transcript unless
    ``config.report_tool_errors`` is set. Provider errors propagate.

    Args:
        prompt: Text from the user.
        transcript: Transcript to grow (modified in place).
        provider: LLM provider adapter.
        tool_executor: Executor that runs tool calls.
        config: Agent runtime configuration.
        console: Where progress notices go; defaults to stderr.

    Returns:
        The final assistant text, or None if the model sent no content or
        the iteration cap was reached.
    """
    console = console if console is not None else Console(stderr=True)
    transcript.append(Message(role=Role.USER, content=prompt))
    tools = get_tool_definitions()

    iteration = 0
    while True:
        if config.max_iterations is not None and iteration >= config.max_iterations:
            logger.warning("Reached max iterations (%d), stopping", config.max_iterations)
            console.print(
                f"Stopped after {config.max_iterations} requests without a final answer",
                style="yellow",
            )
            _report_usage(console, transcript)
            return None
        iteration += 1
        logger.debug("loop iteration %d", iteration)

        completion = await provider.complete(
            messages=transcript.messages,
            tools=tools,
            model=config.model,
        )
        transcript.record_usage(completion.usage)
        console.print(f"Assistant returned {completion.choice_count} choices.", style="dim")
        transcript.append(completion.message)

        reply = completion.reply
        if isinstance(reply, FinalAnswer):
            logger.debug("Conversation complete after %d request(s)", iteration)
            if reply.text is None:
                console.print("Empty message content", style="yellow")
            _report_usage(console, transcript)
            return reply.text

        console.print(f"Assistant picked {len(reply.calls)} tools.", style="dim")
        calls = reply.calls if config.execute_all_tool_calls else reply.calls[:1]

        for tool_call in calls:
            if not tool_executor.has_tool(tool_call.name) and not config.report_tool_errors:
                logger.warning("Model requested unknown tool %r", tool_call.name)
                console.print(
                    f"Tool call {tool_call.name} (ID {tool_call.id}) failed",
                    style="red",
                    markup=False,
                )
                continue

            logger.debug("Executing tool: %s", tool_call.name)
            result = await tool_executor.execute(tool_call)
            if result.is_error:
                console.print(
                    f"Tool call {result.name} (ID {result.tool_call_id}) failed",
                    style="red",
                    markup=False,
                )
                if not config.report_tool_errors:
                    continue
            else:
                console.print(
                    f"Tool call {result.name} (ID {result.tool_call_id}) created output:",
                    markup=False,
                )
                console.print(result.output, markup=False, highlight=False, emoji=False)

            transcript.append(
                Message(
                    role=Role.TOOL,
                    content=result.output,
                    tool_call_id=result.tool_call_id,
                )
            )


def _report_usage(console: Console, transcript: Transcript) -> None:
    """Print the token totals of the conversation as a dim notice."""
    u = transcript.usage
    logger.info("Token usage: %d in / %d out", u.input_tokens, u.output_tokens)
    console.print(
        f"tokens: {u.input_tokens} in / {u.output_tokens} out (total {u.total})",
        style="dim",
    )
