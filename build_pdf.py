#!/usr/bin/env python3
"""Build AETHER 3.0 User Manual as PDF - Entry Point.

Usage: python build_pdf.py
Requires: md-to-pdf (npx will install it if needed).
"""
import sys
from pathlib import Path

# Add the script directory to path for the manualbuild package
SCRIPT_DIR = Path(__file__).resolve().parent
sys.path.insert(0, str(SCRIPT_DIR))

from manualbuild import main

if __name__ == "__main__":
    sys.exit(main(base_dir=SCRIPT_DIR))
