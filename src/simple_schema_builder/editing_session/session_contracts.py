"""Editing session entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from simple_schema_builder.configuration.runtime_settings import Configuration
from simple_schema_builder.field_tree.field_models import FieldTree


@dataclass(frozen=True)
class EditSessionRequest:
    """Input contract for running one edit script."""

    script_path: str
    tree_path: str | None = None
    config_path: str | None = None
    output_tree_path: str | None = None
    keep_snapshots: bool = False
    configuration: Configuration | None = None


@dataclass(frozen=True)
class EditSessionOutcome:
    """Output contract for one completed edit script run."""

    fields: FieldTree
    schema_text: str
    applied_edits: int
    snapshots: tuple[str, ...] = ()
    output_tree_path: Path | None = None
