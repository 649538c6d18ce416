"""Allow ``python -m lineupbalance``."""

import sys

from lineupbalance.cli import main

if __name__ == "__main__":
    sys.exit(main())
