"""Centralized configuration for the integer calculator.

This module defines:
- Input validation limits (line length, power exponent bound)
- Logging defaults (level and optional log file)
- Command names and help text
- Regex patterns for identifiers, integer literals and assignments

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with INTCALC_)
"""

import os
import re

# Version is defined in pyproject.toml [project] section
try:
    import importlib.metadata

    VERSION = importlib.metadata.version("intcalc")
except importlib.metadata.PackageNotFoundError:
    # Fallback if package not installed
    VERSION = "1.0.0"

# Input validation limits
MAX_INPUT_LENGTH = int(os.getenv("INTCALC_MAX_INPUT_LENGTH", "10000"))  # characters
MAX_EXPONENT = int(
    os.getenv("INTCALC_MAX_EXPONENT", "100000")
)  # largest accepted right operand of ^
MAX_RESULT_BITS = int(
    os.getenv("INTCALC_MAX_RESULT_BITS", "1000000")
)  # estimated size limit of a power result (~300000 decimal digits)

# Logging defaults (overridden by --log-level / --log-file)
LOG_LEVEL = os.getenv("INTCALC_LOG_LEVEL", "WARNING")
LOG_FILE = os.getenv("INTCALC_LOG_FILE") or None

# REPL commands
HELP_CMD = "/help"
EXIT_CMD = "/exit"
COMMAND_PREFIX = "/"

HELP_TEXT = (
    "The program calculates operations with integer numbers and variables (+ - * / ^)."
)
FAREWELL_TEXT = "Bye!"

# Used with fullmatch; ASCII only, like the lexer
VAR_NAME_RE = re.compile(r"[+-]?[A-Za-z]+")
INT_VALUE_RE = re.compile(r"[+-]?[0-9]+")
ASSIGN_RE = re.compile(r"^(?P<lhs>[^=]*?)\s*=\s*(?P<rhs>.*)$", re.DOTALL)
