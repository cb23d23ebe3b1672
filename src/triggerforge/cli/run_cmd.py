"""Run CLI command: dispatch a recorded execution context."""

from pathlib import Path

import click
import yaml

from triggerforge.cli.handlers_cmd import import_handler_modules, module_option
from triggerforge.config import TriggerConfig, TriggerConfigError
from triggerforge.core.types import ExecutionContext
from triggerforge.dispatch import HandlerNotFoundError, create_and_execute_handler
from triggerforge.service import TriggerService


def _load_context(path: Path) -> ExecutionContext:
    """Read an ExecutionContext from a YAML or JSON file."""
    try:
        with path.open(encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except yaml.YAMLError as e:
        raise click.ClickException(f"Cannot parse context file: {e}")
    except UnicodeDecodeError as e:
        raise click.ClickException(f"Context file is not valid UTF-8: {e}")

    if not isinstance(data, dict):
        raise click.ClickException("Context file must contain a mapping")

    try:
        return ExecutionContext.from_dict(data)
    except ValueError as e:
        raise click.ClickException(f"Invalid context: {e}")


def _describe(ctx: ExecutionContext) -> str:
    if not ctx.is_active:
        return "inactive context"
    return f"{ctx.phase.value} {ctx.operation.value}"


@click.command()
@click.argument("context_file", type=click.Path(exists=True, path_type=Path))
@click.option(
    "--handler",
    "handler_name",
    default=None,
    help="Registered handler to run. Defaults to the entity's configured handler.",
)
@click.option(
    "--config",
    "config_path",
    default=None,
    type=click.Path(path_type=Path),
    help="Trigger configuration file (default: $TRIGGERFORGE_CONFIG or ./triggers.yaml).",
)
@module_option
def run(
    context_file: Path,
    handler_name: str | None,
    config_path: Path | None,
    modules: tuple[str, ...],
):
    """Dispatch the execution context in CONTEXT_FILE to a trigger handler.

    With --handler the named handler runs directly. Otherwise the handler
    bound to the context's entity in the trigger configuration runs.

    Example context file:

    \b
        entity: Account
        phase: after
        operation: update
        old: {"001": {"name": "Acme"}}
        new: {"001": {"name": "Acme Corp"}}
    """
    import_handler_modules(modules)
    ctx = _load_context(context_file)

    try:
        if handler_name is not None:
            create_and_execute_handler(handler_name, ctx)
            click.echo(f"Dispatched {_describe(ctx)} to {handler_name}.")
            return

        if ctx.entity_name is None:
            raise click.ClickException(
                "Context has no 'entity'; pass --handler to choose a handler."
            )

        try:
            trigger_config = TriggerConfig.load(TriggerConfig.resolve_path(config_path))
        except TriggerConfigError as e:
            raise click.ClickException(str(e))

        if TriggerService(trigger_config).fire(ctx):
            binding = trigger_config.binding_for(ctx.entity_name)
            click.echo(f"Dispatched {_describe(ctx)} to {binding.handler}.")
        else:
            click.echo(f"No active trigger for '{ctx.entity_name}'.")
    except HandlerNotFoundError as e:
        click.echo(click.style(str(e), fg="red"), err=True)
        raise SystemExit(1)
