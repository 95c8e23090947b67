#!/usr/bin/env python3
"""
dotsim — a simulated dotfiles manager.

Entry point for running from a checkout without installing; the
installed console script calls the same typer app.

Usage:
  python dotsim.py add ~/.bashrc
  python dotsim.py list
  python dotsim.py sync
"""
import sys
from pathlib import Path

# src/ has no __init__.py; resolve it from the project root
sys.path.insert(0, str(Path(__file__).parent))

from src.cli.app import app

if __name__ == "__main__":
    app()
