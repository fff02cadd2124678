"""zsmith demo -- run the calculator + clock scenario."""

from __future__ import annotations

import click

from zsmith.cli.formatting import format_answer, format_prompt

DEMO_QUESTION = "What is 42 multiplied by 17? Also, what time is it now?"


@click.command()
@click.pass_context
def demo(ctx: click.Context) -> None:
    """Ask a question that needs both built-in tools."""
    from zsmith.cli import DEMO_SYSTEM_PROMPT, _agent_session

    with _agent_session(ctx, system_prompt=DEMO_SYSTEM_PROMPT) as (agent, console):
        console.print("[dim]Agent initialized with calculator and current_time tools[/dim]")
        format_prompt(DEMO_QUESTION, console)
        format_answer(agent.chat(DEMO_QUESTION), console)
