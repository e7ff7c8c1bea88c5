"""
manualbuild - Build the AETHER 3.0 User Manual PDF.

Runs md-to-pdf on AETHER_3.0_User_Manual.md with the aether-manual.css
stylesheet and checks that AETHER_3.0_User_Manual.pdf was written.

Usage:
    python build_pdf.py
    python build_pdf.py [--base-dir DIR] [--dry-run] [--verbose] [--no-color]
"""

from .cli import __version__, main
from .config import BuildConfig, ManualPaths, expected_output_path, resolve_paths
from .errors import BuildError, ConfigError, ConverterError, MissingOutputError
from .orchestrator import BuildOrchestrator

__all__ = [
    "__version__",
    "main",
    # Configuration
    "BuildConfig",
    "ManualPaths",
    "expected_output_path",
    "resolve_paths",
    # Errors
    "BuildError",
    "ConfigError",
    "ConverterError",
    "MissingOutputError",
    # Orchestrator
    "BuildOrchestrator",
]
