"""
Configuration loading for swiftui-synth.

Settings live in an optional ``swiftui-synth.toml``:

    [render]
    indent = 4

    [output]
    path = "ContentView.swift"
    timing = true

    [logging]
    level = "WARNING"
"""

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .errors import ConfigError
from .renderer import DEFAULT_INDENT

DEFAULT_CONFIG_NAME = "swiftui-synth.toml"

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class RenderConfig:
    """Renderer configuration."""

    indent: int = DEFAULT_INDENT  # spaces per nesting level


@dataclass
class OutputConfig:
    """Output configuration."""

    path: Path | None = None  # default file to save rendered code to
    timing: bool = True  # print "Synthesized SwiftUI layout in ..." header


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"

    @property
    def level_number(self) -> int:
        return int(getattr(logging, self.level))


@dataclass
class SynthConfig:
    """Complete swiftui-synth configuration."""

    render: RenderConfig = field(default_factory=RenderConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    source: Path | None = None  # file the config was loaded from


def load_config(path: Path | None = None) -> SynthConfig:
    """
    Load configuration from a TOML file.

    Args:
        path: Explicit config file. When None, ``swiftui-synth.toml`` in the
            current directory is used if present, else defaults.

    Returns:
        Loaded SynthConfig

    Raises:
        ConfigError: If an explicit file is missing or any file is invalid
    """
    if path is None:
        default = Path.cwd() / DEFAULT_CONFIG_NAME
        if not default.exists():
            return SynthConfig()
        path = default
    elif not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config file '{path}': {e}") from e

    config = parse_config(data, path)
    config.source = path
    return config


def parse_config(data: dict[str, Any], path: Path | None = None) -> SynthConfig:
    """Build a SynthConfig from already-decoded TOML data."""
    where = f" in {path}" if path else ""
    render_data = _section(data, "render", where)
    output_data = _section(data, "output", where)
    logging_data = _section(data, "logging", where)

    indent = render_data.get("indent", DEFAULT_INDENT)
    if not isinstance(indent, int) or isinstance(indent, bool) or indent < 1:
        raise ConfigError(f"render.indent must be a positive integer{where}, got: {indent!r}")

    out_path = output_data.get("path")
    if out_path is not None and not isinstance(out_path, str):
        raise ConfigError(f"output.path must be a string{where}, got: {out_path!r}")

    timing = output_data.get("timing", True)
    if not isinstance(timing, bool):
        raise ConfigError(f"output.timing must be true or false{where}, got: {timing!r}")

    level = logging_data.get("level", "WARNING")
    if not isinstance(level, str) or level.upper() not in _LEVELS:
        choices = ", ".join(_LEVELS)
        raise ConfigError(f"logging.level must be one of {choices}{where}, got: {level!r}")

    return SynthConfig(
        render=RenderConfig(indent=indent),
        output=OutputConfig(path=Path(out_path) if out_path else None, timing=timing),
        logging=LoggingConfig(level=level.upper()),
    )


def _section(data: dict[str, Any], name: str, where: str) -> dict[str, Any]:
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"[{name}] must be a table{where}")
    return section
