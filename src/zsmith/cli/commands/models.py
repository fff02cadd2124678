"""zsmith models -- list selectable models."""

from __future__ import annotations

import click

from zsmith.cli.formatting import format_models, get_console


@click.command()
@click.pass_context
def models(ctx: click.Context) -> None:
    """List model identifiers; * marks the one --model selects."""
    from zsmith.llm.models import ClaudeModel

    current = ClaudeModel.resolve(ctx.obj["model"])
    format_models(list(ClaudeModel), current, get_console())
