"""Tree document reading and writing.

A tree document mirrors the editor's form state::

    fields:
      - name: items
        kind: Array
        arrayItemKind: Nested
        children:
          - name: sku
            kind: String
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .field_models import ARRAY_ITEM_KINDS, Field, FieldKind, FieldTree

_ALLOWED_KEYS = frozenset({"name", "kind", "arrayItemKind", "children"})


class TreeDocumentError(Exception):
    """Raised when a tree document cannot be turned into a field tree."""


def load_tree_document(document_path: Path | str) -> FieldTree:
    """Read a YAML or JSON tree document from disk."""
    path = Path(document_path)
    if not path.exists():
        raise TreeDocumentError(f"Tree document not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise TreeDocumentError(f"Tree document {path} is not valid UTF-8: {exc}") from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise TreeDocumentError(f"Failed to parse tree document {path}: {exc}") from exc
    return fields_from_document(parsed)


def write_tree_document(tree: FieldTree, output_path: Path | str, *, indent: int = 2) -> Path:
    """Write the tree as a JSON tree document and return the resolved path."""
    destination = Path(output_path)
    text = json.dumps(fields_to_document(tree), indent=indent, ensure_ascii=False)
    destination.write_text(text + "\n", encoding="utf-8")
    return destination.resolve()


def fields_from_document(data: Any) -> FieldTree:
    """Build a field tree from parsed document data."""
    if data is None:
        return ()
    if isinstance(data, Mapping):
        unexpected = sorted(str(key) for key in data if key != "fields")
        if unexpected:
            raise TreeDocumentError(f"Unknown tree document keys: {', '.join(unexpected)}")
        data = data.get("fields")
        if data is None:
            return ()
    return _parse_sequence(data, "fields")


def fields_to_document(tree: FieldTree) -> dict[str, list[dict[str, Any]]]:
    """Convert a field tree into plain document data."""
    return {"fields": [_field_to_entry(node) for node in tree]}


def _field_to_entry(node: Field) -> dict[str, Any]:
    entry: dict[str, Any] = {"name": node.name, "kind": node.kind.value}
    if node.array_item_kind is not None:
        entry["arrayItemKind"] = node.array_item_kind.value
    if node.children is not None:
        entry["children"] = [_field_to_entry(child) for child in node.children]
    return entry


def _parse_sequence(value: Any, location: str) -> FieldTree:
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise TreeDocumentError(f"{location} must be a list of fields.")
    return tuple(_parse_field(entry, f"{location}[{index}]") for index, entry in enumerate(value))


def _parse_field(entry: Any, location: str) -> Field:
    if not isinstance(entry, Mapping):
        raise TreeDocumentError(f"{location} must be a mapping.")
    unexpected = sorted(str(key) for key in entry if key not in _ALLOWED_KEYS)
    if unexpected:
        raise TreeDocumentError(f"{location} has unknown keys: {', '.join(unexpected)}")

    name = entry.get("name", "")
    if name is None:
        name = ""
    if not isinstance(name, str):
        raise TreeDocumentError(f"{location}.name must be a string.")

    kind = _parse_kind(entry.get("kind", FieldKind.STRING.value), f"{location}.kind")
    raw_item_kind = entry.get("arrayItemKind")
    raw_children = entry.get("children")

    if kind is not FieldKind.ARRAY and raw_item_kind is not None:
        raise TreeDocumentError(f"{location}.arrayItemKind is only allowed for Array fields.")

    item_kind: FieldKind | None = None
    if kind is FieldKind.ARRAY:
        item_kind = _parse_kind(
            raw_item_kind if raw_item_kind is not None else FieldKind.STRING.value,
            f"{location}.arrayItemKind",
        )
        if item_kind not in ARRAY_ITEM_KINDS:
            raise TreeDocumentError(
                f"{location}.arrayItemKind must be one of "
                f"{', '.join(option.value for option in ARRAY_ITEM_KINDS)}."
            )

    structural = kind is FieldKind.NESTED or item_kind is FieldKind.NESTED
    if not structural:
        if raw_children is not None:
            raise TreeDocumentError(
                f"{location}.children is only allowed for Nested fields or Arrays of Nested items."
            )
        return Field(name=name, kind=kind, array_item_kind=item_kind, children=None)

    children = (
        _parse_sequence(raw_children, f"{location}.children") if raw_children is not None else ()
    )
    return Field(name=name, kind=kind, array_item_kind=item_kind, children=children)


def _parse_kind(value: Any, location: str) -> FieldKind:
    if not isinstance(value, str):
        raise TreeDocumentError(f"{location} must be a string.")
    try:
        return FieldKind(value)
    except ValueError as exc:
        options = ", ".join(kind.value for kind in FieldKind)
        raise TreeDocumentError(f"{location} '{value}' is not one of {options}.") from exc
