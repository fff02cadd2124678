"""Allow ``python -m zsmith.cli``."""

from zsmith.cli import cli

cli()
