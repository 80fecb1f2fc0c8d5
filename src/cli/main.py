"""CLI commands for the configuration loader."""

import json
import sys
import uuid

import click
import structlog

from src.loader import Loader, LoaderError, LoaderSnapshot, format_loader_error
from src.loader.constants import COMPONENT_LOADER
from src.observability.logging import bind_session_context, configure_debug_logging
from src.settings import get_settings


logger = structlog.get_logger()


def _parse_modules(
    ctx: click.Context,  # noqa: ARG001
    param: click.Parameter,  # noqa: ARG001
    values: tuple[str, ...],
) -> list[tuple[str, str]]:
    """Split repeated KEY=SOURCE options into pairs."""
    modules: list[tuple[str, str]] = []
    for value in values:
        key, sep, source = value.partition("=")
        if not sep or not key or not source:
            msg = f"expected KEY=SOURCE, got '{value}'"
            raise click.BadParameter(msg)
        modules.append((key, source))
    return modules


def _summarize(loader: Loader, snapshot: LoaderSnapshot) -> dict[str, object]:
    """Build a JSON-friendly summary of a snapshot."""
    root = snapshot.state.root_module()
    return {
        "templates": loader.store.keys(),
        "tfvars_count": len(snapshot.tfvars),
        "state": {
            "loaded": not snapshot.state.is_empty(),
            "serial": snapshot.state.serial,
            "lineage": snapshot.state.lineage,
            "module_count": len(snapshot.state.modules),
            "root_resource_count": len(root.resources) if root else 0,
        },
        "metrics": loader.metrics.to_dict(),
    }


@click.group()
@click.version_option(version="0.1.0")
def cli() -> None:
    """Terraform configuration loader CLI."""


@cli.command()
@click.option(
    "--dir",
    "directory",
    default=".",
    show_default=True,
    help="Directory containing the root templates.",
)
@click.option(
    "--module",
    "modules",
    multiple=True,
    callback=_parse_modules,
    metavar="KEY=SOURCE",
    help="Fetched module to load, by cache key and source. Repeatable.",
)
@click.option(
    "--var-file",
    "var_files",
    multiple=True,
    help="Variable override file, lowest precedence first. Repeatable.",
)
@click.option(
    "--load-state/--no-load-state",
    default=True,
    help="Load deployment state (default: true).",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the summary as JSON.",
)
@click.option(
    "--json-logs/--no-json-logs",
    default=False,
    help="Use JSON format for logs (default: false).",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Enable debug logging (also enabled by TFLINT_DEBUG).",
)
def load(  # noqa: PLR0913
    directory: str,
    modules: list[tuple[str, str]],
    var_files: tuple[str, ...],
    load_state: bool,
    as_json: bool,
    json_logs: bool,
    debug: bool,
) -> None:
    """Load templates, modules, state and tfvars and print a summary."""
    settings = get_settings()
    configure_debug_logging(debug or settings.debug, json_format=json_logs)
    session_id = str(uuid.uuid4())
    bind_session_context(session_id)

    loader = Loader(settings=settings)
    log = logger.bind(component=COMPONENT_LOADER, command="load")

    try:
        loader.load_all_template(directory)
        for module_key, source in modules:
            loader.load_module_file(module_key, source)
    except (LoaderError, OSError) as e:
        log.warning("load_failed", error=str(e))
        click.echo(format_loader_error(e), err=True)
        sys.exit(1)

    if load_state:
        loader.load_state()
    loader.load_tfvars(var_files)

    snapshot = loader.dump()
    if as_json:
        click.echo(json.dumps(_summarize(loader, snapshot), sort_keys=True, indent=2))
        return

    click.echo(f"Templates: {len(loader.store)}")
    for key in loader.store.keys():
        click.echo(f"  - {key}")
    click.echo(f"Tfvars: {len(snapshot.tfvars)}")
    state = snapshot.state
    if state.is_empty():
        click.echo("State: none")
    else:
        click.echo(f"State: serial {state.serial}, lineage {state.lineage}")


if __name__ == "__main__":
    cli()
