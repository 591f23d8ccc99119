"""Allow ``python -m autolink_headings``."""

import sys

from autolink_headings.cli import main

if __name__ == "__main__":
    sys.exit(main())
