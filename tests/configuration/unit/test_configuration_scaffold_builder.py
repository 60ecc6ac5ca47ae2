"""Configuration scaffold builder tests."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from simple_schema_builder.configuration.config_scaffold_builder import (
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from simple_schema_builder.configuration.loader import load_configuration


def test_build_placeholder_configuration_contains_all_supported_sections() -> None:
    scaffold = build_placeholder_configuration()

    assert "Configuration template" in scaffold
    assert "rendering:" in scaffold
    assert "indent:" in scaffold
    assert "ensure_ascii:" in scaffold
    assert "logging:" in scaffold
    assert "level:" in scaffold
    assert isinstance(yaml.safe_load(scaffold), dict)


def test_written_scaffold_loads_as_default_configuration(tmp_path: Path) -> None:
    output_path = tmp_path / "schema-builder.yaml"

    written_path = write_placeholder_configuration(output_path)
    configuration = load_configuration(written_path)

    assert written_path == output_path.resolve()
    assert configuration.rendering.indent == 2
    assert configuration.logging.level == "WARNING"


def test_write_placeholder_configuration_fails_when_file_exists(tmp_path: Path) -> None:
    output_path = tmp_path / "schema-builder.yaml"
    output_path.write_text("existing", encoding="utf-8")

    with pytest.raises(FileExistsError):
        write_placeholder_configuration(output_path)
