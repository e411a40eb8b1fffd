#!/usr/bin/env python3
"""
Wrapper script that calls the main scanner in src/

This allows users to run `python scan_reputation.py` from the root directory.
"""

import sys
from pathlib import Path

# Add src directory to path
src_dir = Path(__file__).parent / "src"
sys.path.insert(0, str(src_dir))

# Import and run the main function
from main import run

if __name__ == "__main__":
    run()
