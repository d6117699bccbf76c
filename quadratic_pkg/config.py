"""Centralized configuration for the quadratic solver.

This module defines:
- History capacity and storage location
- Persistence keys for history and theme preference
- Number formatting thresholds
- Plot sampling domain
- Allowed SymPy names and regex patterns for parsing coefficients

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with QUADRATIC_)
"""

import os
import re
from pathlib import Path

import sympy as sp
from sympy.parsing.sympy_parser import (
    convert_xor,
    implicit_multiplication_application,
    standard_transformations,
)

try:
    import importlib.metadata

    VERSION = importlib.metadata.version("quadratic-solver")
except Exception:
    # Fallback if package not installed
    VERSION = "1.0.0"

# History configuration
HISTORY_CAPACITY = int(os.getenv("QUADRATIC_HISTORY_CAPACITY", "50"))

# Persistence (key-value store)
STORE_PATH = Path(
    os.getenv(
        "QUADRATIC_STORE_PATH",
        str(Path.home() / ".quadratic_solver" / "store.json"),
    )
)
HISTORY_KEY = "equation-history"
THEME_KEY = "theme"

# Theme preference
THEMES = ("light", "dark")
DEFAULT_THEME = os.getenv("QUADRATIC_DEFAULT_THEME", "dark")
if DEFAULT_THEME not in THEMES:
    DEFAULT_THEME = "dark"

# Number formatting (display thresholds, part of the output contract)
ZERO_SNAP_THRESHOLD = 1e-10  # |x| below this prints as "0"
SCI_UPPER_THRESHOLD = 1e6  # |x| at or above this prints in scientific notation
SCI_LOWER_THRESHOLD = 1e-3  # 0 < |x| below this prints in scientific notation
SCI_DIGITS = 3  # fractional digits of the scientific mantissa
DECIMAL_PLACES = 6  # rounding for plain output

# Fraction display
MAX_FRACTION_DENOMINATOR = int(os.getenv("QUADRATIC_MAX_FRACTION_DENOMINATOR", "100"))
FRACTION_TOLERANCE = 1e-10

# Plot sampling domain
PLOT_X_MIN = float(os.getenv("QUADRATIC_PLOT_X_MIN", "-10"))
PLOT_X_MAX = float(os.getenv("QUADRATIC_PLOT_X_MAX", "10"))
PLOT_STEP = float(os.getenv("QUADRATIC_PLOT_STEP", "0.1"))
ASCII_PLOT_ROWS = 20  # Height of ASCII plot in characters
ASCII_PLOT_COLS = 60  # Width of ASCII plot in characters

# Logging
LOG_LEVEL = os.getenv("QUADRATIC_LOG_LEVEL", "WARNING")

# Input validation limits
MAX_INPUT_LENGTH = int(os.getenv("QUADRATIC_MAX_INPUT_LENGTH", "200"))  # characters

# Names allowed in constant coefficient expressions such as "sqrt(2)/2"
ALLOWED_SYMPY_NAMES = {
    "pi": sp.pi,
    "E": sp.E,
    "e": sp.E,
    "sqrt": sp.sqrt,
    "Rational": sp.Rational,
    "Integer": sp.Integer,
    "Float": sp.Float,
}

TRANSFORMATIONS = standard_transformations + (
    implicit_multiplication_application,
    convert_xor,
)

IDENTIFIER_REGEX = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
COEFFICIENT_CHARS_REGEX = re.compile(r"^[0-9A-Za-z_.+\-*/^()\s]+$")
DECIMAL_COMMA_REGEX = re.compile(r"^\s*[+-]?\d+,\d+\s*$")

# Spoken coefficient phrases: "a equals 2", "coefficient b is minus 3", "c igual a 5"
TRANSCRIPT_CONNECTOR = r"(?:\s*(?:=|:|equals|is|é|vale|igual\s+a)\s*|\s+)"
TRANSCRIPT_NUMBER = (
    r"(?P<sign>-|minus\s+|negative\s+|menos\s+)?(?P<number>\d+(?:[.,]\d+)?)"
)
