"""TriggerForge CLI entry point."""

import logging
import os

import click


@click.group()
@click.option(
    "--log-level",
    default=lambda: os.environ.get("TRIGGERFORGE_LOG_LEVEL", "WARNING"),
    type=click.Choice(
        ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False
    ),
    help="Logging level (default: $TRIGGERFORGE_LOG_LEVEL or WARNING).",
)
def cli(log_level: str):
    """TriggerForge: record lifecycle trigger dispatcher CLI."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )


# Register subcommand groups
from triggerforge.cli.config_cmd import config  # noqa: E402
from triggerforge.cli.handlers_cmd import handlers  # noqa: E402
from triggerforge.cli.run_cmd import run  # noqa: E402

cli.add_command(config)
cli.add_command(handlers)
cli.add_command(run)
