"""
Shared utilities for manualbuild: console logging and subprocess execution.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import Optional


# =============================================================================
# Logging
# =============================================================================


class Logger:
    """Simple colored logger with --no-color and --verbose support.

    Errors go to stderr, everything else to stdout.
    """

    COLORS = {
        "reset": "\033[0m",
        "red": "\033[91m",
        "green": "\033[92m",
        "yellow": "\033[93m",
        "blue": "\033[94m",
        "magenta": "\033[95m",
        "cyan": "\033[96m",
        "bold": "\033[1m",
    }

    def __init__(self, use_color: Optional[bool] = None, verbose: bool = False):
        if use_color is None:
            self._use_color = sys.stdout.isatty()
        else:
            self._use_color = use_color
        self.verbose = verbose

    def set_color(self, use_color: bool) -> None:
        """Set whether to use color output."""
        self._use_color = use_color

    def set_verbose(self, verbose: bool) -> None:
        """Set whether debug messages are printed."""
        self.verbose = verbose

    def _color(self, text: str, color: str) -> str:
        if not self._use_color:
            return text
        return f"{self.COLORS.get(color, '')}{text}{self.COLORS['reset']}"

    def header(self, message: str) -> None:
        """Print a section header."""
        print(f"\n{self._color('===', 'cyan')} {self._color(message, 'bold')} {self._color('===', 'cyan')}")

    def info(self, message: str) -> None:
        """Print an info message."""
        print(f"  {message}")

    def success(self, message: str) -> None:
        """Print a success message."""
        print(f"  {self._color('[OK]', 'green')} {message}")

    def warning(self, message: str) -> None:
        """Print a warning message."""
        print(f"  {self._color('[WARN]', 'yellow')} {message}")

    def error(self, message: str) -> None:
        """Print an error message to stderr."""
        print(f"  {self._color('[ERROR]', 'red')} {message}", file=sys.stderr)

    def debug(self, message: str) -> None:
        """Print a debug message when verbose."""
        if self.verbose:
            print(f"  {self._color('[DEBUG]', 'magenta')} {message}")

    def dry_run(self, message: str) -> None:
        """Print what a dry run would have done."""
        print(f"  {self._color('[DRY-RUN]', 'blue')} {message}")


# Global logger instance
log = Logger()


# =============================================================================
# Runtime Utilities
# =============================================================================


def format_cmd(cmd: list[str]) -> str:
    """Render a command for log output."""
    return " ".join(cmd)


def run_cmd(cmd: list[str], cwd: Optional[Path] = None) -> subprocess.CompletedProcess:
    """Run a command and wait for it, raising on a non-zero exit.

    The child inherits this process's stdin, stdout and stderr, so its
    progress output shows up live. There is no timeout.
    """
    log.debug(f"Running: {format_cmd(cmd)}" + (f" in {cwd}" if cwd else ""))
    return subprocess.run(cmd, cwd=cwd, check=True)
