#!/usr/bin/env python3
"""
Minesweeper - main entry point.

Usage:
    python main.py [--seed N] [--assets DIR] [--fps N] [--mute]
"""
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent / "src"))

from ui.app import main


if __name__ == "__main__":
    sys.exit(main())
