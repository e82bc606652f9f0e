"""Entry point for ``python -m create_rwapp``."""

import sys

from .cli import main

sys.exit(main())
