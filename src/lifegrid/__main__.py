"""Allow running the package with ``python -m lifegrid``."""

import sys

from .frontends.cli import main

sys.exit(main())
