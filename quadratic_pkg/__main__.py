"""Main entry point for running quadratic_pkg as a module.

This allows running the solver with:
    python -m quadratic_pkg solve 1 -3 2
    python -m quadratic_pkg --health-check
    python -m quadratic_pkg history

This is equivalent to running:
    python -m quadratic_pkg.cli
    python quadratic.py
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())
