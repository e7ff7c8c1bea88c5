"""
Command-line entry point for building the AETHER user manual PDF.

Running without arguments builds the manual in the base directory.
Unrecognised arguments are ignored.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional

from .config import build_config
from .errors import BuildError
from .orchestrator import BuildOrchestrator
from .utils import log


# =============================================================================
# Version
# =============================================================================

__version__ = "0.1.0"


# =============================================================================
# Argument Parsing
# =============================================================================


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="build_pdf.py",
        allow_abbrev=False,
        description="Build AETHER_3.0_User_Manual.pdf with md-to-pdf and the AETHER stylesheet",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Requires md-to-pdf (npx installs it if needed).

Examples:
  python build_pdf.py               # Build the manual next to this script
  python build_pdf.py --dry-run     # Show the converter command only
  python build_pdf.py --base-dir docs  # Build the manual in docs/
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show debug output",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be done without running the converter",
    )
    parser.add_argument(
        "--base-dir",
        type=Path,
        help="Directory holding the manual and stylesheet (default: the script's directory)",
    )

    return parser


# =============================================================================
# Entry Point
# =============================================================================


def main(argv: Optional[list[str]] = None, base_dir: Optional[Path] = None) -> int:
    """Main entry point.

    ``base_dir`` is the directory the manual paths are resolved against.
    The entry script passes its own directory and --base-dir takes
    precedence. With neither, the build fails.
    """
    parser = create_parser()
    args, ignored = parser.parse_known_args(argv)

    if args.no_color:
        log.set_color(False)
    log.set_verbose(args.verbose)

    if ignored:
        log.debug(f"Ignoring arguments: {' '.join(ignored)}")

    if args.base_dir is not None:
        base_dir = args.base_dir

    try:
        if base_dir is None:
            raise BuildError("No base directory: run build_pdf.py or pass --base-dir")
        config = build_config(base_dir, dry_run=args.dry_run)
        return BuildOrchestrator(config).run()
    except KeyboardInterrupt:
        log.warning("Interrupted")
        return 130
    except BuildError as e:
        log.error(str(e))
        return 1

