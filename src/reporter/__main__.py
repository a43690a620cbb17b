"""Module entrypoint for `python -m reporter`."""

from __future__ import annotations

import sys

from reporter.main import main

if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
