"""zsmith ask -- answer a single question."""

from __future__ import annotations

import click

from zsmith.cli.formatting import format_answer


@click.command()
@click.argument("question")
@click.option("--system", "system_prompt", default=None, help="System prompt (default: a generic assistant prompt).")
@click.option("-t", "--temperature", type=click.FloatRange(0.0, 1.0), default=None, help="Sampling temperature.")
@click.option("--max-iterations", type=click.IntRange(min=1), default=None, help="Maximum model calls for this question.")
@click.option("--no-tools", is_flag=True, help="Do not offer the built-in tools to the model.")
@click.pass_context
def ask(
    ctx: click.Context,
    question: str,
    system_prompt: str | None,
    temperature: float | None,
    max_iterations: int | None,
    no_tools: bool,
) -> None:
    """Ask one question and print the agent's answer."""
    from zsmith.cli import _agent_session

    with _agent_session(
        ctx,
        system_prompt=system_prompt,
        temperature=temperature,
        max_iterations=max_iterations,
        with_tools=not no_tools,
    ) as (agent, console):
        format_answer(agent.chat(question), console)
