"""Schema synthesis from field trees."""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from simple_schema_builder.configuration.runtime_settings import RenderSettings
from simple_schema_builder.field_tree.field_models import Field, FieldKind

SchemaValue = dict[str, Any] | list[Any] | str


def synthesize(fields: Sequence[Field]) -> dict[str, Any]:
    """Return the schema object described by `fields`.

    Unnamed fields and Nested fields without children produce no key. Array fields
    always produce a one-element list. Later fields win over earlier ones with the
    same name.
    """
    schema: dict[str, Any] = {}
    for field in fields:
        if not field.name:
            continue
        value = _field_schema(field)
        if value is not None:
            schema[field.name] = value
    return schema


def render_schema_text(schema: Any, settings: RenderSettings | None = None) -> str:
    """Pretty-print a synthesized schema as JSON text."""
    resolved = settings or RenderSettings()
    return json.dumps(schema, indent=resolved.indent, ensure_ascii=resolved.ensure_ascii)


def _field_schema(field: Field) -> SchemaValue | None:
    if field.kind is FieldKind.ARRAY:
        if field.array_item_kind is FieldKind.NESTED and field.children:
            return [synthesize(field.children)]
        item_kind = field.array_item_kind or FieldKind.STRING
        return [item_kind.value.lower()]
    if field.kind is FieldKind.NESTED:
        if field.children:
            return synthesize(field.children)
        return None
    return field.kind.value.lower()
