"""Allow ``python -m inkboard``."""

import sys

from inkboard.cli import main

if __name__ == "__main__":
    sys.exit(main())
