"""Field tree domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FieldKind(str, Enum):
    """Declared category of a field; values are the tag strings used at the edit boundary."""

    STRING = "String"
    NUMBER = "Number"
    NESTED = "Nested"
    ARRAY = "Array"


ARRAY_ITEM_KINDS: tuple[FieldKind, ...] = (FieldKind.STRING, FieldKind.NUMBER, FieldKind.NESTED)


@dataclass(frozen=True)
class Field:
    """One declared field of the described JSON document.

    `array_item_kind` is only set for Array fields. `children` is None unless the
    field is Nested or an Array of Nested items; an empty tuple means the slot
    exists but nothing has been added yet.
    """

    name: str = ""
    kind: FieldKind = FieldKind.STRING
    array_item_kind: FieldKind | None = None
    children: tuple[Field, ...] | None = None


FieldTree = tuple[Field, ...]
FieldPath = tuple[int, ...]
