"""Copy-on-write edit operations for field trees.

Every operation takes a tree value and returns a new one. Only the fields on the
route from the root sequence to the edited node are rebuilt; untouched siblings
are shared between the old and the new tree. A failing operation raises before
anything is built, so callers never see a half-edited tree.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import replace

from .field_models import ARRAY_ITEM_KINDS, Field, FieldKind, FieldPath, FieldTree


class FieldTreeError(Exception):
    """Base class for rejected field tree edits."""


class OutOfRangeError(FieldTreeError):
    """Raised when a path or index does not resolve to an existing field."""


class InvalidOperationError(FieldTreeError):
    """Raised when an edit does not fit the field's current kind configuration."""


def create_field() -> Field:
    """Return a fresh unnamed String field."""
    return Field(name="", kind=FieldKind.STRING, array_item_kind=None, children=None)


def add_field(tree: FieldTree) -> FieldTree:
    """Append a fresh field to the top-level sequence."""
    return (*tree, create_field())


def field_at(tree: FieldTree, path: Sequence[int]) -> Field:
    """Return the field addressed by `path`."""
    resolved_path = _normalize_path(path)
    node = tree[_checked_index(tree, resolved_path[0], resolved_path[:1])]
    for depth in range(1, len(resolved_path)):
        if node.children is None:
            raise OutOfRangeError(
                f"Path {_format_path(resolved_path)} does not resolve: "
                f"field {_format_path(resolved_path[:depth])} has no children."
            )
        location = resolved_path[: depth + 1]
        node = node.children[_checked_index(node.children, resolved_path[depth], location)]
    return node


def set_name(tree: FieldTree, path: Sequence[int], name: str) -> FieldTree:
    """Replace the name of the field at `path` verbatim."""
    return _map_field(tree, path, lambda node: replace(node, name=name))


def set_kind(tree: FieldTree, path: Sequence[int], new_kind: FieldKind | str) -> FieldTree:
    """Change the kind of the field at `path`, keeping the structural slots consistent."""
    kind = _coerce_kind(new_kind)
    return _map_field(tree, path, lambda node: _transition_kind(node, kind))


def set_array_item_kind(
    tree: FieldTree, path: Sequence[int], new_item_kind: FieldKind | str
) -> FieldTree:
    """Change the item kind of the Array field at `path`."""
    item_kind = _coerce_kind(new_item_kind)
    if item_kind not in ARRAY_ITEM_KINDS:
        raise InvalidOperationError(
            f"Array item kind must be one of {_format_kinds(ARRAY_ITEM_KINDS)}, "
            f"got {item_kind.value}."
        )
    resolved_path = _normalize_path(path)

    def _apply(node: Field) -> Field:
        if node.kind is not FieldKind.ARRAY:
            raise InvalidOperationError(
                f"Field {_format_path(resolved_path)} is {node.kind.value}, "
                "only Array fields have an item kind."
            )
        if item_kind is not FieldKind.NESTED:
            return replace(node, array_item_kind=item_kind, children=None)
        children = node.children if node.children is not None else ()
        return replace(node, array_item_kind=item_kind, children=children)

    return _map_field(tree, resolved_path, _apply)


def add_child(tree: FieldTree, path: Sequence[int]) -> FieldTree:
    """Append a fresh field to the children of the field at `path`."""
    resolved_path = _normalize_path(path)

    def _apply(node: Field) -> Field:
        children = _require_children(node, resolved_path)
        return replace(node, children=(*children, create_field()))

    return _map_field(tree, resolved_path, _apply)


def remove_child(tree: FieldTree, path: Sequence[int], child_index: int) -> FieldTree:
    """Remove one child (and its subtree) from the field at `path`."""
    resolved_path = _normalize_path(path)

    def _apply(node: Field) -> Field:
        children = _require_children(node, resolved_path)
        index = _checked_index(children, child_index, (*resolved_path, child_index))
        return replace(node, children=children[:index] + children[index + 1 :])

    return _map_field(tree, resolved_path, _apply)


def remove_field(tree: FieldTree, index: int) -> FieldTree:
    """Remove a top-level field (and its subtree)."""
    resolved = _checked_index(tree, index, (index,))
    return tree[:resolved] + tree[resolved + 1 :]


def remove_field_at(tree: FieldTree, path: Sequence[int]) -> FieldTree:
    """Remove the field at `path` from whichever sequence contains it."""
    resolved_path = _normalize_path(path)
    if len(resolved_path) == 1:
        return remove_field(tree, resolved_path[0])
    return remove_child(tree, resolved_path[:-1], resolved_path[-1])


def _transition_kind(node: Field, kind: FieldKind) -> Field:
    if kind is FieldKind.ARRAY:
        if node.array_item_kind is None:
            return replace(node, kind=kind, array_item_kind=FieldKind.STRING, children=None)
        children = node.children if node.kind is FieldKind.ARRAY else None
        return replace(node, kind=kind, children=children)
    if kind is FieldKind.NESTED:
        if node.children is not None and node.kind is FieldKind.NESTED:
            return replace(node, kind=kind, array_item_kind=None)
        return replace(node, kind=kind, array_item_kind=None, children=())
    return replace(node, kind=kind, array_item_kind=None, children=None)


def _map_field(
    tree: FieldTree, path: Sequence[int], transform: Callable[[Field], Field]
) -> FieldTree:
    resolved_path = _normalize_path(path)
    return _rebuild(tree, resolved_path, 0, transform)


def _rebuild(
    sequence: FieldTree,
    path: FieldPath,
    depth: int,
    transform: Callable[[Field], Field],
) -> FieldTree:
    index = _checked_index(sequence, path[depth], path[: depth + 1])
    node = sequence[index]
    if depth == len(path) - 1:
        updated = transform(node)
    else:
        if node.children is None:
            raise OutOfRangeError(
                f"Path {_format_path(path)} does not resolve: "
                f"field {_format_path(path[: depth + 1])} has no children."
            )
        updated = replace(node, children=_rebuild(node.children, path, depth + 1, transform))
    return sequence[:index] + (updated,) + sequence[index + 1 :]


def _require_children(node: Field, path: FieldPath) -> FieldTree:
    if node.children is None:
        kind_label = node.kind.value
        if node.kind is FieldKind.ARRAY and node.array_item_kind is not None:
            kind_label = f"Array of {node.array_item_kind.value}"
        raise InvalidOperationError(
            f"Field {_format_path(path)} ({kind_label}) cannot hold child fields."
        )
    return node.children


def _checked_index(sequence: Sequence[Field], index: int, location: Sequence[int]) -> int:
    if isinstance(index, bool) or not isinstance(index, int):
        raise OutOfRangeError(f"Index at {_format_path(location)} must be an integer.")
    if not 0 <= index < len(sequence):
        raise OutOfRangeError(
            f"Index {index} at {_format_path(location)} is out of range "
            f"for a sequence of {len(sequence)} field(s)."
        )
    return index


def _normalize_path(path: Sequence[int]) -> FieldPath:
    resolved = tuple(path)
    if not resolved:
        raise OutOfRangeError("An empty path does not address a field.")
    return resolved


def _coerce_kind(value: FieldKind | str) -> FieldKind:
    try:
        return FieldKind(value)
    except ValueError as exc:
        raise InvalidOperationError(
            f"Unknown field kind {value!r}; expected one of {_format_kinds(tuple(FieldKind))}."
        ) from exc


def _format_kinds(kinds: Sequence[FieldKind]) -> str:
    return ", ".join(kind.value for kind in kinds)


def _format_path(path: Sequence[int]) -> str:
    return "[" + ", ".join(str(index) for index in path) + "]"
