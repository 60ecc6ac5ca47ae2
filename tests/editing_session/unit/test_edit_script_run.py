"""Edit script run use-case tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from simple_schema_builder.configuration import Configuration, RenderSettings
from simple_schema_builder.editing_session import (
    EditSessionError,
    EditSessionRequest,
    execute_edit_script_run,
)
from simple_schema_builder.field_tree import load_tree_document


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_runs_script_on_empty_tree(tmp_path: Path) -> None:
    script = _write_file(
        tmp_path / "edits.yaml",
        """
edits:
  - op: add_field
  - op: set_name
    path: [0]
    name: tags
  - op: set_kind
    path: [0]
    kind: Array
""",
    )

    outcome = execute_edit_script_run(EditSessionRequest(script_path=str(script)))

    assert outcome.applied_edits == 3
    assert json.loads(outcome.schema_text) == {"tags": ["string"]}
    assert outcome.snapshots == ()
    assert outcome.output_tree_path is None


def test_runs_script_on_starting_tree_and_writes_result(tmp_path: Path) -> None:
    tree = _write_file(
        tmp_path / "tree.yaml",
        """
fields:
  - name: addr
    kind: Nested
    children:
      - name: city
""",
    )
    script = _write_file(
        tmp_path / "edits.json",
        json.dumps(
            {
                "edits": [
                    {"op": "add_child", "path": [0]},
                    {"op": "set_name", "path": [0, 1], "name": "zip"},
                ]
            }
        ),
    )
    output = tmp_path / "result.json"

    outcome = execute_edit_script_run(
        EditSessionRequest(
            script_path=str(script),
            tree_path=str(tree),
            output_tree_path=str(output),
            keep_snapshots=True,
        )
    )

    assert json.loads(outcome.schema_text) == {"addr": {"city": "string", "zip": "string"}}
    assert [json.loads(snapshot) for snapshot in outcome.snapshots] == [
        {"addr": {"city": "string"}},
        {"addr": {"city": "string", "zip": "string"}},
    ]
    assert outcome.output_tree_path == output.resolve()
    assert load_tree_document(output) == outcome.fields


def test_uses_configured_indent(tmp_path: Path) -> None:
    config = _write_file(tmp_path / "config.yaml", "rendering:\n  indent: 4\n")
    script = _write_file(
        tmp_path / "edits.yaml",
        "edits:\n  - op: add_field\n  - op: set_name\n    path: [0]\n    name: id\n",
    )

    outcome = execute_edit_script_run(
        EditSessionRequest(script_path=str(script), config_path=str(config))
    )

    assert outcome.schema_text == '{\n    "id": "string"\n}'


def test_preloaded_configuration_is_used_without_reading_config_path(tmp_path: Path) -> None:
    script = _write_file(
        tmp_path / "edits.yaml",
        "edits:\n  - op: add_field\n  - op: set_name\n    path: [0]\n    name: id\n",
    )
    configuration = Configuration(path=None, rendering=RenderSettings(indent=3))

    outcome = execute_edit_script_run(
        EditSessionRequest(
            script_path=str(script),
            config_path=str(tmp_path / "absent.yaml"),
            configuration=configuration,
        )
    )

    assert outcome.schema_text == '{\n   "id": "string"\n}'


def test_failing_edit_reports_position(tmp_path: Path) -> None:
    script = _write_file(
        tmp_path / "edits.yaml",
        "edits:\n  - op: add_field\n  - op: add_child\n    path: [0]\n",
    )

    with pytest.raises(EditSessionError, match=r"Edit 1 \(add_child path=\[0\]\) failed"):
        execute_edit_script_run(EditSessionRequest(script_path=str(script)))


@pytest.mark.parametrize(
    ("files", "request_kwargs", "message"),
    [
        ({}, {"script_path": "missing.yaml"}, "Edit script not found"),
        (
            {"edits.yaml": "edits: []\n"},
            {"script_path": "edits.yaml", "tree_path": "missing-tree.yaml"},
            "Tree document not found",
        ),
        (
            {"edits.yaml": "edits: []\n", "config.yaml": "rendering: 3\n"},
            {"script_path": "edits.yaml", "config_path": "config.yaml"},
            "must be a mapping",
        ),
    ],
)
def test_input_errors_are_wrapped(
    tmp_path: Path, files: dict[str, str], request_kwargs: dict[str, str], message: str
) -> None:
    for name, contents in files.items():
        _write_file(tmp_path / name, contents)
    resolved = {key: str(tmp_path / value) for key, value in request_kwargs.items()}

    with pytest.raises(EditSessionError, match=message):
        execute_edit_script_run(EditSessionRequest(**resolved))
