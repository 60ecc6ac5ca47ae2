"""Stateful editing session over an immutable field tree."""

from __future__ import annotations

import logging
from typing import Any

from simple_schema_builder.configuration.runtime_settings import RenderSettings
from simple_schema_builder.edit_scripts.edit_dispatch import apply_edit
from simple_schema_builder.edit_scripts.edit_operations import EditOperation
from simple_schema_builder.field_tree.field_models import FieldTree
from simple_schema_builder.schema_synthesis import render_schema_text, synthesize

_LOGGER = logging.getLogger(__name__)


class SchemaBuilderSession:
    """Holds the current tree and the schema derived from it.

    Edits are applied one at a time. After every successful edit the schema is
    synthesized again; a rejected edit leaves tree and schema untouched.
    """

    def __init__(
        self,
        fields: FieldTree = (),
        *,
        render_settings: RenderSettings | None = None,
    ) -> None:
        self._render_settings = render_settings or RenderSettings()
        self._fields: FieldTree = tuple(fields)
        self._schema: dict[str, Any] = synthesize(self._fields)
        self._schema_text = render_schema_text(self._schema, self._render_settings)

    @property
    def fields(self) -> FieldTree:
        return self._fields

    @property
    def schema(self) -> dict[str, Any]:
        return self._schema

    @property
    def schema_text(self) -> str:
        return self._schema_text

    def apply(self, operation: EditOperation) -> str:
        """Apply one edit and return the regenerated schema text."""
        updated = apply_edit(self._fields, operation)
        self._fields = updated
        self._schema = synthesize(updated)
        self._schema_text = render_schema_text(self._schema, self._render_settings)
        _LOGGER.debug(
            "applied %s; schema now has %d top-level key(s)",
            operation.describe(),
            len(self._schema),
        )
        return self._schema_text
