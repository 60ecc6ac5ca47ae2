"""Apply edit operations to field trees."""

from __future__ import annotations

from simple_schema_builder.field_tree import tree_edits
from simple_schema_builder.field_tree.field_models import FieldKind, FieldTree

from .edit_operations import EditOperation, EditOperationKind


def apply_edit(tree: FieldTree, operation: EditOperation) -> FieldTree:
    """Return the tree produced by applying one edit operation."""
    kind = operation.kind
    if kind is EditOperationKind.ADD_FIELD:
        return tree_edits.add_field(tree)
    if kind is EditOperationKind.SET_NAME:
        return tree_edits.set_name(tree, operation.path, operation.name or "")
    if kind is EditOperationKind.SET_KIND:
        return tree_edits.set_kind(tree, operation.path, _required_kind(operation))
    if kind is EditOperationKind.SET_ARRAY_ITEM_KIND:
        return tree_edits.set_array_item_kind(tree, operation.path, _required_kind(operation))
    if kind is EditOperationKind.ADD_CHILD:
        return tree_edits.add_child(tree, operation.path)
    if kind is EditOperationKind.REMOVE_CHILD:
        if operation.child_index is None:
            raise ValueError("remove_child requires a child index.")
        return tree_edits.remove_child(tree, operation.path, operation.child_index)
    if kind is EditOperationKind.REMOVE_FIELD:
        return tree_edits.remove_field_at(tree, operation.path)
    raise ValueError(f"Unsupported edit operation: {kind}")


def _required_kind(operation: EditOperation) -> FieldKind:
    if operation.field_kind is None:
        raise ValueError(f"{operation.kind.value} requires a kind.")
    return operation.field_kind
