"""
Build configuration for the AETHER user manual.

Constants, dataclasses, optional YAML overrides and path resolution.
"""

from __future__ import annotations

import shlex
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError

__all__ = [
    "SOURCE_NAME",
    "STYLESHEET_NAME",
    "OUTPUT_SUFFIX",
    "CONVERTER_COMMAND",
    "CONFIG_FILENAME",
    "ConfigError",
    "BuildConfig",
    "ManualPaths",
    "expected_output_path",
    "resolve_paths",
    "load_config_file",
    "build_config",
]

# =============================================================================
# Constants
# =============================================================================

SOURCE_NAME = "AETHER_3.0_User_Manual.md"
STYLESHEET_NAME = "aether-manual.css"
OUTPUT_SUFFIX = ".pdf"

# md-to-pdf writes <source>.pdf next to the source; npx installs it on demand
CONVERTER_COMMAND = ["npx", "--yes", "md-to-pdf"]

# Optional per-directory overrides
CONFIG_FILENAME = "manual-build.yaml"

_CONFIG_KEYS = {"source", "stylesheet", "converter"}


# =============================================================================
# Data Classes
# =============================================================================


@dataclass
class BuildConfig:
    """Configuration for a build run."""

    base_dir: Path
    source_name: str = SOURCE_NAME
    stylesheet_name: str = STYLESHEET_NAME
    converter: list[str] = field(default_factory=lambda: list(CONVERTER_COMMAND))
    dry_run: bool = False


@dataclass(frozen=True)
class ManualPaths:
    """The three paths a build works with, resolved once per run."""

    source: Path
    stylesheet: Path
    output: Path


# =============================================================================
# Path Resolution
# =============================================================================


def expected_output_path(source: Path) -> Path:
    """Return the path the converter is expected to write.

    Only the extension changes: ``X.md`` becomes ``X.pdf``.
    """
    return source.with_suffix(OUTPUT_SUFFIX)


def resolve_paths(config: BuildConfig) -> ManualPaths:
    """Resolve source, stylesheet and output against the configured base dir."""
    base_dir = Path(config.base_dir).absolute()
    source = base_dir / config.source_name
    return ManualPaths(
        source=source,
        stylesheet=base_dir / config.stylesheet_name,
        output=expected_output_path(source),
    )


# =============================================================================
# Config File
# =============================================================================


def load_config_file(base_dir: Path) -> dict[str, Any]:
    """Load overrides from manual-build.yaml in base_dir.

    Returns an empty dict when the file does not exist.

    Raises:
        ConfigError: If the file is not a mapping, has unknown keys, or
            holds values of the wrong type.
    """
    path = Path(base_dir) / CONFIG_FILENAME
    if not path.exists():
        return {}

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Could not parse {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping")

    unknown = sorted(set(data) - _CONFIG_KEYS)
    if unknown:
        raise ConfigError(f"Unknown keys in {path}: {', '.join(unknown)}")

    for key in ("source", "stylesheet"):
        if key in data and not isinstance(data[key], str):
            raise ConfigError(f"'{key}' in {path} must be a string")

    converter = data.get("converter")
    if converter is not None:
        if isinstance(converter, str):
            data["converter"] = shlex.split(converter)
        elif not (isinstance(converter, list) and all(isinstance(c, str) for c in converter)):
            raise ConfigError(f"'converter' in {path} must be a string or a list of strings")
        if not data["converter"]:
            raise ConfigError(f"'converter' in {path} must not be empty")

    return data


def build_config(base_dir: Path, dry_run: bool = False) -> BuildConfig:
    """Create a BuildConfig for base_dir, applying manual-build.yaml if present."""
    overrides = load_config_file(base_dir)
    config = BuildConfig(base_dir=Path(base_dir), dry_run=dry_run)
    if "source" in overrides:
        config.source_name = overrides["source"]
    if "stylesheet" in overrides:
        config.stylesheet_name = overrides["stylesheet"]
    if overrides.get("converter"):
        config.converter = list(overrides["converter"])
    return config
