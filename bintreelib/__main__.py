"""Allow running the driver with ``python -m bintreelib``."""

import sys

from .cli import main

sys.exit(main())
