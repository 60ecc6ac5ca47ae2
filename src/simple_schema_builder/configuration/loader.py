"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    DEFAULT_INDENT,
    DEFAULT_LOG_LEVEL,
    Configuration,
    LoggingSettings,
    RenderSettings,
)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_KNOWN_SECTIONS = ("rendering", "logging")


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigurationError(f"Configuration file {path} is not valid UTF-8: {exc}") from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    unknown = sorted(str(key) for key in parsed if key not in _KNOWN_SECTIONS)
    if unknown:
        raise ConfigurationError(f"Unknown configuration sections: {', '.join(unknown)}")

    rendering = _parse_rendering_section(parsed.get("rendering"))
    logging_settings = _parse_logging_section(parsed.get("logging"))

    return Configuration(path=path, rendering=rendering, logging=logging_settings)


def _parse_rendering_section(value: Any) -> RenderSettings:
    section = _optional_mapping(value, "rendering")
    indent = _require_positive_int(section.get("indent", DEFAULT_INDENT), "rendering.indent")
    ensure_ascii = _require_bool(section.get("ensure_ascii", False), "rendering.ensure_ascii")
    return RenderSettings(indent=indent, ensure_ascii=ensure_ascii)


def _parse_logging_section(value: Any) -> LoggingSettings:
    section = _optional_mapping(value, "logging")
    level_raw = section.get("level", DEFAULT_LOG_LEVEL)
    if not isinstance(level_raw, str):
        raise ConfigurationError("logging.level must be a string.")
    level = level_raw.strip().upper()
    if level not in _LOG_LEVELS:
        raise ConfigurationError(f"logging.level must be one of {', '.join(_LOG_LEVELS)}.")
    return LoggingSettings(level=level)


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
