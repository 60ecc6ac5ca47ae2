"""Edit operation entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from simple_schema_builder.field_tree.field_models import FieldKind, FieldPath


class EditOperationKind(str, Enum):
    """Supported tree edits, named as they appear in edit scripts."""

    ADD_FIELD = "add_field"
    SET_NAME = "set_name"
    SET_KIND = "set_kind"
    SET_ARRAY_ITEM_KIND = "set_array_item_kind"
    ADD_CHILD = "add_child"
    REMOVE_CHILD = "remove_child"
    REMOVE_FIELD = "remove_field"


@dataclass(frozen=True)
class EditOperation:
    """One discrete edit issued against a field tree."""

    kind: EditOperationKind
    path: FieldPath = ()
    name: str | None = None
    field_kind: FieldKind | None = None
    child_index: int | None = None

    def describe(self) -> str:
        parts = [self.kind.value]
        if self.path:
            parts.append(f"path={list(self.path)}")
        if self.name is not None:
            parts.append(f"name={self.name!r}")
        if self.field_kind is not None:
            parts.append(f"kind={self.field_kind.value}")
        if self.child_index is not None:
            parts.append(f"index={self.child_index}")
        return " ".join(parts)
