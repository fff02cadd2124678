"""Rich formatting helpers for the zsmith CLI.

Provides functions that format agent output and tool/model listings for
terminal display. Rich auto-detects TTY and degrades gracefully when piped
(no ANSI codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from zsmith.llm.models import ClaudeModel
    from zsmith.toolkit.models import ToolDefinition


def get_console() -> Console:
    """Create a Rich Console that auto-detects TTY for graceful pipe degradation."""
    return Console(stderr=False)


def format_prompt(text: str, console: Console) -> None:
    """Echo the user's question."""
    console.print(f"[bold cyan]User:[/bold cyan] {escape(text)}")


def format_answer(text: str, console: Console) -> None:
    """Display the agent's final answer."""
    if not text:
        console.print("[dim]Agent: (no text in response)[/dim]")
        return
    console.print(f"[bold green]Agent:[/bold green] {escape(text)}")


def format_tools(definitions: list[ToolDefinition], console: Console) -> None:
    """Display tool definitions as a table."""
    if not definitions:
        console.print("[dim]No tools registered.[/dim]")
        return

    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Name", style="cyan")
    table.add_column("Parameters", style="yellow")
    table.add_column("Description")

    for definition in definitions:
        properties = definition.input_schema.get("properties", {})
        table.add_row(
            definition.name,
            ", ".join(properties) or "-",
            escape(definition.description),
        )

    console.print(table)


def format_models(models: list[ClaudeModel], current: ClaudeModel, console: Console) -> None:
    """Display selectable models, marking the one in effect."""
    for model in models:
        marker = "*" if model is current else " "
        console.print(f"{marker} {model.value}", highlight=False)


def format_error(message: str, console: Console) -> None:
    """Display an error message."""
    console.print(f"[red]Error:[/red] {escape(message)}", highlight=False)
