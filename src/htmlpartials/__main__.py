"""Module entry point for running with python -m htmlpartials."""

import sys

from htmlpartials.cli import main

if __name__ == "__main__":
    sys.exit(main())
