"""Entry point for running gpxdoc as a module.

Usage:
    python -m gpxdoc
"""

import sys

from gpxdoc.cli import main

if __name__ == "__main__":
    sys.exit(main())
