"""Field tree domain exports."""

from .field_models import ARRAY_ITEM_KINDS, Field, FieldKind, FieldPath, FieldTree
from .tree_documents import (
    TreeDocumentError,
    fields_from_document,
    fields_to_document,
    load_tree_document,
    write_tree_document,
)
from .tree_edits import (
    FieldTreeError,
    InvalidOperationError,
    OutOfRangeError,
    add_child,
    add_field,
    create_field,
    field_at,
    remove_child,
    remove_field,
    remove_field_at,
    set_array_item_kind,
    set_kind,
    set_name,
)

__all__ = [
    "ARRAY_ITEM_KINDS",
    "Field",
    "FieldKind",
    "FieldPath",
    "FieldTree",
    "FieldTreeError",
    "InvalidOperationError",
    "OutOfRangeError",
    "TreeDocumentError",
    "add_child",
    "add_field",
    "create_field",
    "field_at",
    "fields_from_document",
    "fields_to_document",
    "load_tree_document",
    "remove_child",
    "remove_field",
    "remove_field_at",
    "set_array_item_kind",
    "set_kind",
    "set_name",
    "write_tree_document",
]
