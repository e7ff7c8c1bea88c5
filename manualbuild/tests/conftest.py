"""
Shared pytest fixtures for manualbuild tests.

Provides an isolated manual directory and a fake converter so builds can be
exercised without npx or md-to-pdf.

Test Tier Markers:
  @pytest.mark.evergreen - Tests that always run, never skip
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import Optional

import pytest

from manualbuild import orchestrator
from manualbuild.config import SOURCE_NAME, STYLESHEET_NAME
from manualbuild.utils import log


# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test tiers."""
    config.addinivalue_line(
        "markers",
        "evergreen: tests that always run, never skip"
    )


@pytest.fixture(autouse=True)
def plain_log(monkeypatch: pytest.MonkeyPatch) -> None:
    """Disable color and debug output so assertions see plain text."""
    monkeypatch.setattr(log, "_use_color", False)
    monkeypatch.setattr(log, "verbose", False)


# =============================================================================
# Manual Directory
# =============================================================================


@pytest.fixture
def manual_dir(tmp_path: Path) -> Path:
    """Create a directory holding the manual source and stylesheet."""
    base = tmp_path / "docs"
    base.mkdir()
    (base / SOURCE_NAME).write_text("# AETHER 3.0 User Manual\n", encoding="utf-8")
    (base / STYLESHEET_NAME).write_text("body { font-family: sans-serif; }\n", encoding="utf-8")
    return base


# =============================================================================
# Fake Converter
# =============================================================================


class FakeConverter:
    """Stand-in for run_cmd that records calls and simulates md-to-pdf.

    Modes:
        write   - write <source>.pdf and exit 0
        noop    - exit 0 without writing anything
        fail    - exit non-zero
        missing - the executable cannot be found
    """

    def __init__(self, mode: str = "write", content: bytes = b"%PDF-1.7\n"):
        self.mode = mode
        self.content = content
        self.calls: list[tuple[list[str], Optional[Path]]] = []

    def __call__(self, cmd: list[str], cwd: Optional[Path] = None) -> subprocess.CompletedProcess:
        self.calls.append((list(cmd), cwd))

        if self.mode == "missing":
            raise FileNotFoundError(2, "No such file or directory", cmd[0])
        if self.mode == "fail":
            raise subprocess.CalledProcessError(1, cmd)
        if self.mode == "write":
            source = Path(cmd[cmd.index("--stylesheet") - 1])
            source.with_suffix(".pdf").write_bytes(self.content)

        return subprocess.CompletedProcess(cmd, 0, None, None)


@pytest.fixture
def fake_converter(monkeypatch: pytest.MonkeyPatch) -> FakeConverter:
    """Install a FakeConverter in place of run_cmd for the orchestrator."""
    converter = FakeConverter()
    monkeypatch.setattr(orchestrator, "run_cmd", converter)
    return converter


# =============================================================================
# Script Converter
# =============================================================================

# Mimics md-to-pdf: writes <source>.pdf and prints progress to stdout
SCRIPT_CONVERTER = (
    "import pathlib, sys\n"
    "src = pathlib.Path(sys.argv[1])\n"
    "assert sys.argv[2] == '--stylesheet'\n"
    "print('converting', src.name)\n"
    "src.with_suffix('.pdf').write_bytes(b'%PDF-1.7\\n')\n"
)


@pytest.fixture
def script_converter() -> list[str]:
    """Converter command prefix that runs a real child process."""
    return [sys.executable, "-c", SCRIPT_CONVERTER]
