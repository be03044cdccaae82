"""Module entrypoint for ``python -m lazyexplorer``."""

import sys

from .cli import main


if __name__ == "__main__":
    sys.exit(main())
