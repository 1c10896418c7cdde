"""
Entry point for running poolselect as a module.

Usage: python -m poolselect pools.yaml --trials 1000
"""

import sys
from poolselect.cli import main

if __name__ == "__main__":
    sys.exit(main())
