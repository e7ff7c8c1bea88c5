"""
Build orchestrator for the AETHER user manual.

Resolves the manual paths, runs the external Markdown-to-PDF converter with
the stylesheet, and verifies that the expected PDF was written.
"""

from __future__ import annotations

import subprocess
import time
from typing import Optional

from .config import BuildConfig, ManualPaths, resolve_paths
from .errors import ConverterError, MissingOutputError
from .utils import format_cmd, log, run_cmd


# =============================================================================
# Converter Invocation
# =============================================================================


def converter_command(converter: list[str], paths: ManualPaths) -> list[str]:
    """Build the converter command line for the resolved paths."""
    return [*converter, str(paths.source), "--stylesheet", str(paths.stylesheet)]


def run_converter(cmd: list[str], config: BuildConfig) -> None:
    """Run the converter in the base directory and wait for it to finish.

    Streams are inherited so the converter's progress is visible live.

    Raises:
        ConverterError: If the process cannot be started or exits non-zero.
    """
    try:
        run_cmd(cmd, cwd=config.base_dir)
    except (subprocess.CalledProcessError, OSError) as e:
        raise ConverterError(f"Build failed: {e}") from e


# =============================================================================
# Build Orchestrator
# =============================================================================


class BuildOrchestrator:
    """Orchestrates a single manual build."""

    def __init__(self, config: BuildConfig):
        self.config = config
        self.paths: Optional[ManualPaths] = None

        # Timing tracking
        self._build_start: Optional[float] = None
        self.duration: Optional[float] = None

    def _announce(self, paths: ManualPaths) -> None:
        log.header(f"Building {paths.output.name} (AETHER style)")
        log.info(f"Input:      {paths.source}")
        log.info(f"Stylesheet: {paths.stylesheet}")
        log.info(f"Output:     {paths.output}")

    def _verify_output(self, paths: ManualPaths) -> None:
        """Check that the converter wrote the PDF next to the source.

        Raises:
            MissingOutputError: If the expected PDF does not exist.
        """
        if not paths.output.exists():
            raise MissingOutputError(paths.output)

    def run(self) -> int:
        """Run the build. Returns 0 on success.

        Raises:
            ConverterError: If the converter could not be run.
            MissingOutputError: If the converter ran but wrote no PDF.
        """
        self._build_start = time.time()
        self.paths = paths = resolve_paths(self.config)
        self._announce(paths)

        cmd = converter_command(self.config.converter, paths)
        if self.config.dry_run:
            log.dry_run(f"Would run: {format_cmd(cmd)} in {self.config.base_dir}")
            return 0

        run_converter(cmd, self.config)
        self._verify_output(paths)

        self.duration = round(time.time() - self._build_start, 3)
        log.success(f"PDF written to: {paths.output}")
        log.debug(f"Build took {self.duration}s")
        return 0
