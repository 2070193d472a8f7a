"""Entry point for running cs01 as a module (python -m cs01)."""

import sys

from .cli import main


if __name__ == '__main__':
    sys.exit(main())
