"""
freqcolor CLI entry point.

Usage:
    python -m freqcolor.cli
    python -m freqcolor.cli show [path]
    python -m freqcolor.cli counts [path]
"""

import sys
from .main import main

if __name__ == "__main__":
    sys.exit(main())
