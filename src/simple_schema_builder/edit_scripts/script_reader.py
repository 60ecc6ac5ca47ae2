"""Edit script reading service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from simple_schema_builder.field_tree.field_models import FieldKind, FieldPath

from .edit_operations import EditOperation, EditOperationKind

_PAYLOAD_KEYS: dict[EditOperationKind, tuple[str, ...]] = {
    EditOperationKind.ADD_FIELD: (),
    EditOperationKind.SET_NAME: ("path", "name"),
    EditOperationKind.SET_KIND: ("path", "kind"),
    EditOperationKind.SET_ARRAY_ITEM_KIND: ("path", "item_kind"),
    EditOperationKind.ADD_CHILD: ("path",),
    EditOperationKind.REMOVE_CHILD: ("path", "index"),
    EditOperationKind.REMOVE_FIELD: ("path",),
}


class EditScriptError(Exception):
    """Raised when an edit script is malformed."""


def read_edit_script(script_path: Path | str) -> tuple[EditOperation, ...]:
    """Read a YAML or JSON edit script from disk."""
    path = Path(script_path)
    if not path.exists():
        raise EditScriptError(f"Edit script not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise EditScriptError(f"Edit script {path} is not valid UTF-8: {exc}") from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise EditScriptError(f"Failed to parse edit script {path}: {exc}") from exc
    return parse_edit_script(parsed)


def parse_edit_script(data: Any) -> tuple[EditOperation, ...]:
    """Parse edit script data (a mapping with an `edits` list, or the bare list)."""
    if data is None:
        return ()
    if isinstance(data, Mapping):
        unexpected = sorted(str(key) for key in data if key != "edits")
        if unexpected:
            raise EditScriptError(f"Unknown edit script keys: {', '.join(unexpected)}")
        data = data.get("edits")
        if data is None:
            return ()
    if isinstance(data, (str, bytes)) or not isinstance(data, Sequence):
        raise EditScriptError("edits must be a list of edit operations.")
    return tuple(_parse_operation(entry, f"edits[{index}]") for index, entry in enumerate(data))


def _parse_operation(entry: Any, location: str) -> EditOperation:
    if not isinstance(entry, Mapping):
        raise EditScriptError(f"{location} must be a mapping.")
    op_raw = entry.get("op")
    if not isinstance(op_raw, str):
        raise EditScriptError(f"{location}.op must be a string.")
    try:
        kind = EditOperationKind(op_raw.strip())
    except ValueError as exc:
        options = ", ".join(option.value for option in EditOperationKind)
        raise EditScriptError(f"{location}.op '{op_raw}' is not one of {options}.") from exc

    allowed = _PAYLOAD_KEYS[kind]
    unexpected = sorted(str(key) for key in entry if key != "op" and key not in allowed)
    if unexpected:
        raise EditScriptError(
            f"{location} ({kind.value}) has unknown keys: {', '.join(unexpected)}"
        )

    path: FieldPath = ()
    if "path" in allowed:
        path = _require_path(entry.get("path"), f"{location}.path")
    name = None
    if "name" in allowed:
        name = _optional_name(entry.get("name"), f"{location}.name")
    field_kind = None
    if "kind" in allowed:
        field_kind = _require_kind(entry.get("kind"), f"{location}.kind")
    if "item_kind" in allowed:
        field_kind = _require_kind(entry.get("item_kind"), f"{location}.item_kind")
    child_index = None
    if "index" in allowed:
        child_index = _require_int(entry.get("index"), f"{location}.index")

    return EditOperation(
        kind=kind,
        path=path,
        name=name,
        field_kind=field_kind,
        child_index=child_index,
    )


def _require_path(value: Any, location: str) -> FieldPath:
    if isinstance(value, int) and not isinstance(value, bool):
        return (value,)
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise EditScriptError(f"{location} must be a list of indices.")
    if not value:
        raise EditScriptError(f"{location} must not be empty.")
    return tuple(_require_int(item, location) for item in value)


def _require_int(value: Any, location: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise EditScriptError(f"{location} must be an integer.")
    return value


def _optional_name(value: Any, location: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise EditScriptError(f"{location} must be a string.")
    return value


def _require_kind(value: Any, location: str) -> FieldKind:
    if not isinstance(value, str):
        raise EditScriptError(f"{location} must be a string.")
    try:
        return FieldKind(value)
    except ValueError as exc:
        options = ", ".join(kind.value for kind in FieldKind)
        raise EditScriptError(f"{location} '{value}' is not one of {options}.") from exc
