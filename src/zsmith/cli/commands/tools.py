"""zsmith tools -- list the built-in tools."""

from __future__ import annotations

import click

from zsmith.cli.formatting import format_tools, get_console


@click.command()
def tools() -> None:
    """List the tools offered to the model."""
    from zsmith.toolkit.builtin import builtin_tools
    from zsmith.toolkit.protocols import definition_of

    format_tools([definition_of(tool) for tool in builtin_tools()], get_console())
