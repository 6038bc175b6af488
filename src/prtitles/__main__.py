"""Allow ``python -m prtitles``."""

import sys

from prtitles.cli import main

if __name__ == "__main__":
    sys.exit(main())
