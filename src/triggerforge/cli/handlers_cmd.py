"""Handler CLI commands: list registered handlers."""

import importlib

import click

from triggerforge.handlers import HandlerRegistry

module_option = click.option(
    "--module",
    "-m",
    "modules",
    multiple=True,
    help="Module to import before running, so its handlers register. Repeatable.",
)


def import_handler_modules(modules: tuple[str, ...]) -> None:
    """Import modules whose @trigger_handler decorators populate the registry."""
    for name in modules:
        try:
            importlib.import_module(name)
        except ImportError as e:
            raise click.ClickException(f"Cannot import handler module '{name}': {e}")


@click.group()
def handlers():
    """Handler commands."""
    pass


@handlers.command("list")
@module_option
def list_cmd(modules: tuple[str, ...]):
    """List registered trigger handlers."""
    import_handler_modules(modules)

    names = HandlerRegistry.list_registered()
    if not names:
        click.echo("No trigger handlers registered.")
        return

    click.echo(f"{len(names)} trigger handler(s) registered:")
    for name in names:
        click.echo(f"  {name}")
