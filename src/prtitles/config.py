"""Configuration management for prtitles.

Supports loading configuration from:
1. Environment variables (PRTITLES_*)
2. Config file (~/.prtitles/config.yaml)
3. Default values

Example config file (~/.prtitles/config.yaml):
    extraction:
      project_root: "PremiereData"
      title_marker: "CompressedTitle"
      header_size: 32
      encoding: "base64"
    output:
      output_dir: "/tmp/titles"
"""

from __future__ import annotations

import os
import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from prtitles.errors import ConfigError

# Config file search locations (in priority order)
CONFIG_LOCATIONS = [
    Path.home() / ".prtitles" / "config.yaml",
    Path.home() / ".config" / "prtitles" / "config.yaml",
    Path(".prtitles.yaml"),
]


@dataclass
class ExtractionConfig:
    """Project parsing and payload detection settings."""

    project_root: str = "PremiereData"
    title_marker: str = "CompressedTitle"
    header_size: int = 32
    encoding: str = "base64"


@dataclass
class OutputConfig:
    """Where title files are written."""

    output_dir: str | None = None


@dataclass
class PrtitlesConfig:
    """Main configuration for prtitles."""

    extraction: ExtractionConfig = field(default_factory=ExtractionConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


def _load_yaml_config() -> dict[str, Any]:
    """Load configuration from the first YAML file found."""
    for config_path in CONFIG_LOCATIONS:
        if config_path.exists():
            try:
                with open(config_path, encoding="utf-8") as f:
                    data = yaml.safe_load(f)
                    return data if isinstance(data, dict) else {}
            except (OSError, yaml.YAMLError) as e:
                warnings.warn(f"Ignoring config file {config_path}: {e}", stacklevel=2)
                continue
    return {}


def _get_env(key: str, default: Any = None) -> Any:
    """Get environment variable with PRTITLES_ prefix."""
    return os.environ.get(f"PRTITLES_{key}", default)


def _section(file_config: dict[str, Any], name: str) -> dict[str, Any]:
    """Return a config file section, which must be a mapping."""
    section = file_config.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"Config section '{name}' must be a mapping, got {type(section).__name__}")
    return section


def _parse_header_size(value: Any) -> int:
    """Parse the payload header size, a positive number of bytes."""
    try:
        header_size = int(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid header_size: {value!r}") from e
    if header_size < 1:
        raise ConfigError(f"header_size must be a positive number of bytes, got {header_size}")
    return header_size


def load_config() -> PrtitlesConfig:
    """Load configuration from file and environment variables.

    Priority (highest first):
    1. Environment variables (PRTITLES_*)
    2. Config file (~/.prtitles/config.yaml)
    3. Default values

    Raises:
        ConfigError: If a section or value has the wrong shape
    """
    file_config = _load_yaml_config()
    defaults = ExtractionConfig()

    # Extraction config
    extraction_config = _section(file_config, "extraction")
    extraction = ExtractionConfig(
        project_root=_get_env("PROJECT_ROOT")
        or extraction_config.get("project_root", defaults.project_root),
        title_marker=_get_env("TITLE_MARKER")
        or extraction_config.get("title_marker", defaults.title_marker),
        header_size=_parse_header_size(
            _get_env("HEADER_SIZE") or extraction_config.get("header_size", defaults.header_size)
        ),
        encoding=_get_env("ENCODING") or extraction_config.get("encoding", defaults.encoding),
    )

    # Output config
    output_config = _section(file_config, "output")
    output = OutputConfig(
        output_dir=_get_env("OUTPUT_DIR") or output_config.get("output_dir"),
    )

    return PrtitlesConfig(extraction=extraction, output=output)


# Global config instance (lazy loaded)
_config: PrtitlesConfig | None = None


def get_config() -> PrtitlesConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Reset the global configuration (for testing)."""
    global _config
    _config = None
