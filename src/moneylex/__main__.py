"""Entry point for ``python -m moneylex``."""

import sys

from moneylex.cli import main

sys.exit(main())
