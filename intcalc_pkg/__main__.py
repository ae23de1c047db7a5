"""Main entry point for running intcalc_pkg as a module.

This allows running the calculator with:
    python -m intcalc_pkg
    python -m intcalc_pkg --health-check
    python -m intcalc_pkg -e "2+2"

This is equivalent to running:
    python -m intcalc_pkg.cli
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())
