"""Allow ``python -m gator``."""
import sys

from gator.cli.runner import main

if __name__ == "__main__":
    sys.exit(main())
