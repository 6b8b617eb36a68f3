"""Entry point for ``python -m netchart``."""

import sys

from netchart.dashboard import main

sys.exit(main())
