"""Allow ``python -m titletotags``."""

from __future__ import annotations

import sys

from titletotags.cli import main

if __name__ == "__main__":
    sys.exit(main())
