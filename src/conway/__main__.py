"""Allow running the CLI with ``python -m conway``."""

import sys

from .frontends.cli import main

sys.exit(main())
