"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from simple_schema_builder.configuration import (
    DEFAULT_CONFIG_FILENAME,
    Configuration,
    write_placeholder_configuration,
)
from simple_schema_builder.editing_session import (
    EditSessionError,
    EditSessionRequest,
    execute_edit_script_run,
    load_session_configuration,
)
from simple_schema_builder.field_tree import TreeDocumentError, load_tree_document
from simple_schema_builder.schema_synthesis import render_schema_text, synthesize

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="simple-schema-builder")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log every applied edit.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Build JSON schemas from typed field trees."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML configuration template with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="synthesize")
@click.option(
    "--tree",
    "tree_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to a YAML/JSON tree document",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional YAML configuration file",
)
@click.pass_context
def synthesize_tree(ctx: click.Context, tree_path: str, config_path: str | None) -> None:
    """Print the schema described by a tree document."""
    try:
        configuration = load_session_configuration(config_path)
        _configure_logging(configuration, verbose=ctx.obj["verbose"])
        fields = load_tree_document(tree_path)
    except (EditSessionError, TreeDocumentError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(render_schema_text(synthesize(fields), configuration.rendering))


@cli.command(name="apply")
@click.option(
    "--script",
    "script_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to a YAML/JSON edit script",
)
@click.option(
    "--tree",
    "tree_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional tree document to start from (default: empty tree)",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional YAML configuration file",
)
@click.option(
    "--output-tree",
    "output_tree_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional path to write the resulting tree document",
)
@click.option(
    "--trace",
    is_flag=True,
    default=False,
    help="Print the schema after every edit instead of only the final one.",
)
@click.pass_context
def apply_script(
    ctx: click.Context,
    script_path: str,
    tree_path: str | None,
    config_path: str | None,
    output_tree_path: str | None,
    trace: bool,
) -> None:
    """Apply an edit script and print the resulting schema."""
    try:
        configuration = load_session_configuration(config_path)
        _configure_logging(configuration, verbose=ctx.obj["verbose"])
        outcome = execute_edit_script_run(
            EditSessionRequest(
                script_path=script_path,
                tree_path=tree_path,
                config_path=config_path,
                output_tree_path=output_tree_path,
                keep_snapshots=trace,
                configuration=configuration,
            )
        )
    except EditSessionError as exc:
        raise CliError(str(exc)) from exc

    if trace:
        for position, snapshot in enumerate(outcome.snapshots):
            click.echo(f"# after edit {position}")
            click.echo(snapshot)
    else:
        click.echo(outcome.schema_text)
    if outcome.output_tree_path is not None:
        click.echo(f"tree written: {outcome.output_tree_path}", err=True)


def _configure_logging(configuration: Configuration, *, verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, configuration.logging.level)
    logging.basicConfig(format=_LOG_FORMAT, stream=sys.stderr)
    logging.getLogger("simple_schema_builder").setLevel(level)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
