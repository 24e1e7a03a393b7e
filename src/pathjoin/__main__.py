"""Allow running as ``python -m pathjoin``."""

import sys

from pathjoin.cli import main

if __name__ == "__main__":
    sys.exit(main())
