"""Editing session exports."""

from .edit_script_run import EditSessionError, execute_edit_script_run, load_session_configuration
from .schema_builder_session import SchemaBuilderSession
from .session_contracts import EditSessionOutcome, EditSessionRequest

__all__ = [
    "EditSessionError",
    "EditSessionOutcome",
    "EditSessionRequest",
    "SchemaBuilderSession",
    "execute_edit_script_run",
    "load_session_configuration",
]
