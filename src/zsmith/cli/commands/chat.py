"""zsmith chat -- interactive conversation."""

from __future__ import annotations

import click

from zsmith.cli.formatting import format_answer

_EXIT_COMMANDS = {"/exit", "/quit"}
_CLEAR_COMMAND = "/clear"


@click.command()
@click.option("--system", "system_prompt", default=None, help="System prompt (default: a generic assistant prompt).")
@click.option("-t", "--temperature", type=click.FloatRange(0.0, 1.0), default=None, help="Sampling temperature.")
@click.pass_context
def chat(ctx: click.Context, system_prompt: str | None, temperature: float | None) -> None:
    """Start an interactive conversation.

    Type /clear to forget the conversation so far, /exit to quit.
    """
    from zsmith.cli import _agent_session

    with _agent_session(ctx, system_prompt=system_prompt, temperature=temperature) as (agent, console):
        console.print("[dim]Tools: " + ", ".join(agent.tools) + ". /clear resets, /exit quits.[/dim]")
        while True:
            try:
                line = click.prompt("You", prompt_suffix="> ")
            except click.Abort:
                console.print()
                break
            text = line.strip()
            if not text:
                continue
            if text in _EXIT_COMMANDS:
                break
            if text == _CLEAR_COMMAND:
                agent.clear_memory()
                console.print("[dim]Conversation cleared.[/dim]")
                continue
            format_answer(agent.chat(text), console)
