"""Allow running the converter with ``python -m csv2rdf``."""

import sys

from .main import main

if __name__ == "__main__":
    sys.exit(main())
