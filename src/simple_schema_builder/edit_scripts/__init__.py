"""Edit script exports."""

from .edit_dispatch import apply_edit
from .edit_operations import EditOperation, EditOperationKind
from .script_reader import EditScriptError, parse_edit_script, read_edit_script

__all__ = [
    "EditOperation",
    "EditOperationKind",
    "EditScriptError",
    "apply_edit",
    "parse_edit_script",
    "read_edit_script",
]
