"""
Entry point for running guidequill as a module.

Usage:
    python -m guidequill render guide.md --url https://example.com
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
