"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_INDENT = 2
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class RenderSettings:
    """How synthesized schemas are turned into text."""

    indent: int = DEFAULT_INDENT
    ensure_ascii: bool = False


@dataclass(frozen=True)
class LoggingSettings:
    """Root logging level applied by the command line."""

    level: str = DEFAULT_LOG_LEVEL


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path | None
    rendering: RenderSettings = field(default_factory=RenderSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)


def default_configuration() -> Configuration:
    """Configuration used when no configuration file is given."""
    return Configuration(path=None)
