"""Edit script run use-case service."""

from __future__ import annotations

import logging
from pathlib import Path

from simple_schema_builder.configuration import (
    Configuration,
    ConfigurationError,
    default_configuration,
    load_configuration,
)
from simple_schema_builder.edit_scripts import EditScriptError, read_edit_script
from simple_schema_builder.field_tree import (
    FieldTreeError,
    TreeDocumentError,
    load_tree_document,
    write_tree_document,
)
from simple_schema_builder.field_tree.field_models import FieldTree

from .schema_builder_session import SchemaBuilderSession
from .session_contracts import EditSessionOutcome, EditSessionRequest

_LOGGER = logging.getLogger(__name__)


class EditSessionError(Exception):
    """Raised when an edit script run cannot be completed."""


def execute_edit_script_run(request: EditSessionRequest) -> EditSessionOutcome:
    """Apply every edit of a script to the starting tree and return the result."""
    configuration = request.configuration or load_session_configuration(request.config_path)
    starting_fields = _load_starting_fields(request.tree_path)
    try:
        operations = read_edit_script(request.script_path)
    except (EditScriptError, OSError) as exc:
        raise EditSessionError(str(exc)) from exc

    session = SchemaBuilderSession(
        starting_fields, render_settings=configuration.rendering
    )
    snapshots: list[str] = []
    for position, operation in enumerate(operations):
        try:
            schema_text = session.apply(operation)
        except (FieldTreeError, ValueError) as exc:
            raise EditSessionError(
                f"Edit {position} ({operation.describe()}) failed: {exc}"
            ) from exc
        if request.keep_snapshots:
            snapshots.append(schema_text)
    _LOGGER.info("applied %d edit(s) from %s", len(operations), request.script_path)

    output_tree_path: Path | None = None
    if request.output_tree_path:
        try:
            output_tree_path = write_tree_document(
                session.fields,
                request.output_tree_path,
                indent=configuration.rendering.indent,
            )
        except OSError as exc:
            raise EditSessionError(str(exc)) from exc

    return EditSessionOutcome(
        fields=session.fields,
        schema_text=session.schema_text,
        applied_edits=len(operations),
        snapshots=tuple(snapshots),
        output_tree_path=output_tree_path,
    )


def load_session_configuration(config_path: str | None) -> Configuration:
    """Load the configuration file, or the defaults when none is given."""
    if config_path is None:
        return default_configuration()
    try:
        return load_configuration(config_path)
    except (ConfigurationError, OSError) as exc:
        raise EditSessionError(str(exc)) from exc


def _load_starting_fields(tree_path: str | None) -> FieldTree:
    if tree_path is None:
        return ()
    try:
        return load_tree_document(tree_path)
    except (TreeDocumentError, OSError) as exc:
        raise EditSessionError(str(exc)) from exc
