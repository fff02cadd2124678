"""zsmith CLI -- terminal interface for the tool-using agent.

This module is NEVER imported from zsmith/__init__.py.
It is only loaded via the ``zsmith`` entry point defined in pyproject.toml.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING

try:
    import click
except ImportError:
    raise ImportError(
        "CLI dependencies not installed. Install with: pip install zsmith[cli]"
    ) from None

from zsmith.cli.formatting import format_error, get_console

if TYPE_CHECKING:
    from collections.abc import Iterator

    from rich.console import Console

    from zsmith.agent import Agent
    from zsmith.llm.protocols import LLMClient


DEMO_SYSTEM_PROMPT = """\
You are a helpful assistant with access to tools.
Use the calculator tool for math operations.
Use the current_time tool to get the current date and time.
Be concise in your responses.
"""


@click.group()
@click.option("--api-key", default=None, help="API key (default: ZSMITH_ANTHROPIC_API_KEY or ANTHROPIC_API_KEY).")
@click.option("--anthropic-version", default=None, help="anthropic-version header (default: ZSMITH_ANTHROPIC_VERSION or ANTHROPIC_VERSION).")
@click.option("--model", default=None, envvar="ZSMITH_MODEL", help="Full or partial model name, e.g. 'sonnet'.")
@click.option("--base-url", default=None, envvar="ZSMITH_BASE_URL", help="API base URL.")
@click.option("-v", "--verbose", is_flag=True, help="Log requests and tool calls to stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    api_key: str | None,
    anthropic_version: str | None,
    model: str | None,
    base_url: str | None,
    verbose: bool,
) -> None:
    """zsmith: a minimal tool-using conversational agent."""
    ctx.ensure_object(dict)
    ctx.obj["api_key"] = api_key
    ctx.obj["anthropic_version"] = anthropic_version
    ctx.obj["model"] = model
    ctx.obj["base_url"] = base_url
    _configure_logging(verbose)


def _configure_logging(verbose: bool) -> None:
    """Route zsmith logs through rich on stderr."""
    from rich.console import Console
    from rich.logging import RichHandler

    logger = logging.getLogger("zsmith")
    logger.handlers.clear()
    logger.addHandler(
        RichHandler(console=Console(stderr=True), show_path=False, markup=False)
    )
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def _make_client(ctx: click.Context) -> LLMClient:
    """Build the LLM client from global options and the environment.

    Raises:
        LLMConfigError: If credentials or the API version are missing.
    """
    from zsmith.llm.client import ClaudeClient

    return ClaudeClient(
        api_key=ctx.obj["api_key"],
        anthropic_version=ctx.obj["anthropic_version"],
        model=ctx.obj["model"],
        base_url=ctx.obj["base_url"],
    )


@contextmanager
def _agent_session(
    ctx: click.Context,
    *,
    system_prompt: str | None = None,
    temperature: float | None = None,
    max_iterations: int | None = None,
    with_tools: bool = True,
) -> Iterator[tuple[Agent, Console]]:
    """Context manager that builds an Agent, yields (agent, console), and handles cleanup.

    Ensures the client is closed on exit and formats exceptions as CLI errors.
    """
    from zsmith.agent import Agent
    from zsmith.models.config import AgentConfig
    from zsmith.toolkit.builtin import builtin_tools

    console = get_console()
    try:
        overrides: dict = {}
        if temperature is not None:
            overrides["temperature"] = temperature
        if max_iterations is not None:
            overrides["max_iterations"] = max_iterations
        config = AgentConfig(**overrides)

        client = _make_client(ctx)
        try:
            agent = Agent(client, system_prompt, config=config)
            if with_tools:
                for tool in builtin_tools():
                    agent.register_tool(tool)
            yield agent, console
        finally:
            client.close()
    except SystemExit:
        raise
    except Exception as e:
        format_error(str(e), console)
        raise SystemExit(1) from None


# Register subcommands after cli group is defined
from zsmith.cli.commands.ask import ask  # noqa: E402
from zsmith.cli.commands.chat import chat  # noqa: E402
from zsmith.cli.commands.demo import demo  # noqa: E402
from zsmith.cli.commands.models import models  # noqa: E402
from zsmith.cli.commands.tools import tools  # noqa: E402

cli.add_command(ask)
cli.add_command(chat)
cli.add_command(demo)
cli.add_command(models)
cli.add_command(tools)
