"""Allow running as ``python -m llm_capabilities``."""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
