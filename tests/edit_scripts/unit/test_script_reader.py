"""Edit script reading tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from simple_schema_builder.edit_scripts import (
    EditOperation,
    EditOperationKind,
    EditScriptError,
    parse_edit_script,
    read_edit_script,
)
from simple_schema_builder.field_tree import FieldKind


def test_parses_every_operation_kind() -> None:
    operations = parse_edit_script(
        {
            "edits": [
                {"op": "add_field"},
                {"op": "set_name", "path": [0], "name": "items"},
                {"op": "set_kind", "path": [0], "kind": "Array"},
                {"op": "set_array_item_kind", "path": [0], "item_kind": "Nested"},
                {"op": "add_child", "path": [0]},
                {"op": "remove_child", "path": [0], "index": 0},
                {"op": "remove_field", "path": 0},
            ]
        }
    )

    assert operations == (
        EditOperation(kind=EditOperationKind.ADD_FIELD),
        EditOperation(kind=EditOperationKind.SET_NAME, path=(0,), name="items"),
        EditOperation(kind=EditOperationKind.SET_KIND, path=(0,), field_kind=FieldKind.ARRAY),
        EditOperation(
            kind=EditOperationKind.SET_ARRAY_ITEM_KIND, path=(0,), field_kind=FieldKind.NESTED
        ),
        EditOperation(kind=EditOperationKind.ADD_CHILD, path=(0,)),
        EditOperation(kind=EditOperationKind.REMOVE_CHILD, path=(0,), child_index=0),
        EditOperation(kind=EditOperationKind.REMOVE_FIELD, path=(0,)),
    )


def test_missing_name_means_empty_name() -> None:
    (operation,) = parse_edit_script([{"op": "set_name", "path": [1, 2]}])

    assert operation.name == ""
    assert operation.path == (1, 2)


def test_empty_script_has_no_operations() -> None:
    assert parse_edit_script(None) == ()
    assert parse_edit_script({"edits": []}) == ()


@pytest.mark.parametrize(
    ("data", "message"),
    [
        ([{"op": "rename"}], r"edits\[0\]\.op 'rename' is not one of"),
        ([{"path": [0]}], r"edits\[0\]\.op must be a string"),
        ([{"op": "set_kind", "path": [0], "kind": "Bool"}], r"edits\[0\]\.kind 'Bool'"),
        ([{"op": "set_kind", "path": [0]}], r"edits\[0\]\.kind must be a string"),
        ([{"op": "add_child", "path": []}], "must not be empty"),
        ([{"op": "add_child", "path": ["0"]}], "must be an integer"),
        ([{"op": "add_child", "path": [True]}], "must be an integer"),
        ([{"op": "add_child"}], r"edits\[0\]\.path must be a list"),
        ([{"op": "remove_child", "path": [0]}], r"edits\[0\]\.index must be an integer"),
        ([{"op": "add_field", "path": [0]}], "unknown keys: path"),
        ([{"op": "set_name", "path": [0], "name": 5}], "name must be a string"),
        (["add_field"], r"edits\[0\] must be a mapping"),
        ({"edits": "add_field"}, "must be a list"),
        ({"edits": {}}, "must be a list"),
        ({"edits": 0}, "must be a list"),
        ({"steps": []}, "Unknown edit script keys"),
    ],
)
def test_rejects_malformed_scripts(data: object, message: str) -> None:
    with pytest.raises(EditScriptError, match=message):
        parse_edit_script(data)


def test_reads_sample_script() -> None:
    sample = Path(__file__).resolve().parents[3] / "samples" / "order-edits.yaml"

    operations = read_edit_script(sample)

    assert operations[0].kind is EditOperationKind.ADD_FIELD
    assert operations[-1] == EditOperation(
        kind=EditOperationKind.SET_NAME, path=(1, 0), name="sku"
    )


def test_missing_script_file(tmp_path: Path) -> None:
    with pytest.raises(EditScriptError, match="not found"):
        read_edit_script(tmp_path / "edits.yaml")


def test_describe_mentions_payload() -> None:
    operation = EditOperation(kind=EditOperationKind.REMOVE_CHILD, path=(0, 1), child_index=2)

    assert operation.describe() == "remove_child path=[0, 1] index=2"


def test_non_utf8_script_file(tmp_path: Path) -> None:
    path = tmp_path / "edits.yaml"
    path.write_bytes(b"edits:\n  - op: \xff\n")

    with pytest.raises(EditScriptError, match="not valid UTF-8"):
        read_edit_script(path)
