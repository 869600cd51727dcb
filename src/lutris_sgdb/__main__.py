"""Allow running lutris-sgdb with ``python -m lutris_sgdb``."""

import sys

from lutris_sgdb.cli import main

if __name__ == "__main__":
    sys.exit(main())
