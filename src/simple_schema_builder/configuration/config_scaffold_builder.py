"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "schema-builder.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for simple-schema-builder.
# Every setting is optional; remove a line to fall back to its default.

rendering:
  # Spaces per indentation level of the printed schema (positive integer).
  indent: 2
  # Escape non-ASCII characters in field names as \\uXXXX sequences.
  ensure_ascii: false

logging:
  # One of DEBUG, INFO, WARNING, ERROR, CRITICAL. --verbose forces DEBUG.
  level: WARNING
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with defaults and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
