"""Entry point for running adjgraph as a module (python -m adjgraph)."""

import sys

from .cli import main

if __name__ == '__main__':
    sys.exit(main())
