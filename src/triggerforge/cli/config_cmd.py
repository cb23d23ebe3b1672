"""Config CLI commands: validate the trigger configuration."""

from pathlib import Path

import click

from triggerforge.config import TriggerConfig, validate_config_file


@click.group()
def config():
    """Trigger configuration commands."""
    pass


@config.command()
@click.option(
    "--path",
    "config_path",
    default=None,
    type=click.Path(path_type=Path),
    help="Trigger configuration file (default: $TRIGGERFORGE_CONFIG or ./triggers.yaml).",
)
def validate(config_path: Path | None):
    """Validate the trigger configuration file."""
    path = TriggerConfig.resolve_path(config_path)
    issues = validate_config_file(path)

    for issue in issues:
        click.echo(click.style(str(issue), fg="red"))

    if issues:
        click.echo(
            click.style(f"\n{len(issues)} error(s) found", fg="red", bold=True)
        )
        raise SystemExit(1)

    trigger_config = TriggerConfig.load(path)
    click.echo(f"Loaded {len(trigger_config.bindings)} trigger binding(s):")
    for binding in trigger_config.bindings:
        state = "" if binding.active else " (inactive)"
        click.echo(f"  ✓ {binding.entity} -> {binding.handler}{state}")

    click.echo(click.style("\nTrigger configuration is valid.", fg="green", bold=True))
