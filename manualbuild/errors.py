"""Errors raised while building the manual."""

from __future__ import annotations

from pathlib import Path


class BuildError(RuntimeError):
    """Base class for failures that end a build with exit status 1."""


class ConfigError(BuildError):
    """Raised when manual-build.yaml cannot be used."""


class ConverterError(BuildError):
    """Raised when the converter cannot be launched or exits non-zero."""


class MissingOutputError(BuildError):
    """Raised when the converter finished but the expected PDF is absent."""

    def __init__(self, expected: Path):
        self.expected = expected
        super().__init__(f"PDF was not created. Expected: {expected}")
