"""
Entry point for running exparse as a module.

Usage:
    python -m exparse parse "1 + 2 * 3"
"""

import sys

from exparse.cli import main

if __name__ == "__main__":
    sys.exit(main())
