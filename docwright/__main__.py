"""Allow ``python -m docwright``."""

import sys

from .cli import main

sys.exit(main())
