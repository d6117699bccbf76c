"""Display formatting for numbers, polynomials and root results.

The thresholds in ``format_number`` are part of the output contract: history
listings and test fixtures compare the formatted strings directly.
"""

from __future__ import annotations

import math
from datetime import datetime, timezone
from decimal import Decimal
from fractions import Fraction

from .config import (
    DECIMAL_PLACES,
    FRACTION_TOLERANCE,
    MAX_FRACTION_DENOMINATOR,
    SCI_DIGITS,
    SCI_LOWER_THRESHOLD,
    SCI_UPPER_THRESHOLD,
    ZERO_SNAP_THRESHOLD,
)
from .types import Complex, RealDistinct, RealDouble, RootResult

# Largest magnitude printed as a plain integer (repr switches to exponent form above it)
_PLAIN_INTEGER_LIMIT = 1e21


def _to_exponential(value: float, digits: int) -> str:
    """Scientific notation with an unpadded signed exponent, e.g. 1.235e+6."""
    mantissa, exponent = f"{value:.{digits}e}".split("e")
    exp = int(exponent)
    return f"{mantissa}e{'+' if exp >= 0 else '-'}{abs(exp)}"


def format_number(num: float | str) -> str:
    """Normalize a number for display.

    - zero or |x| < 1e-10 prints as "0"
    - |x| >= 1e6 or |x| < 1e-3 prints in scientific notation, 3 fractional digits
    - anything else is rounded half up to 6 decimal places

    Numeric strings are accepted so already-formatted values can be passed back in.

    Examples:
        >>> format_number(1234567)
        '1.235e+6'
        >>> format_number(1 / 3)
        '0.333333'
        >>> format_number(1e-12)
        '0'
    """
    value = float(num)
    if not math.isfinite(value):
        return str(value)
    magnitude = abs(value)
    if magnitude < ZERO_SNAP_THRESHOLD:
        return "0"
    if magnitude >= SCI_UPPER_THRESHOLD or magnitude < SCI_LOWER_THRESHOLD:
        return _to_exponential(value, SCI_DIGITS)
    scale = 10**DECIMAL_PLACES
    rounded = math.floor(value * scale + 0.5) / scale
    if rounded.is_integer():
        return str(int(rounded))
    return repr(rounded)


def format_coefficient(value: float) -> str:
    """Print a coefficient literally, the way JavaScript's String(number) does.

    Examples:
        >>> format_coefficient(2.0)
        '2'
        >>> format_coefficient(1e-5)
        '0.00001'
        >>> format_coefficient(1e-7)
        '1e-7'
    """
    value = float(value)
    if value.is_integer() and abs(value) < _PLAIN_INTEGER_LIMIT:
        return str(int(value))
    text = repr(value)
    if "e" not in text:
        return text
    mantissa, exponent = text.split("e")
    exp = int(exponent)
    # Positional between 1e-7 and 1e21, exponent form (unpadded) outside
    if -7 < exp < 21:
        return format(Decimal(text), "f")
    return f"{mantissa}e{'+' if exp >= 0 else '-'}{abs(exp)}"


def format_polynomial(a: float, b: float, c: float) -> str:
    """Render ax² + bx + c with zero terms omitted and unit coefficients implied.

    Examples:
        >>> format_polynomial(1, -1, 0)
        'x²-x'
        >>> format_polynomial(-1, 0, 5)
        '-x²+5'
        >>> format_polynomial(0, 0, 0)
        '0'
    """
    parts: list[str] = []

    if a != 0:
        if a == 1:
            prefix = ""
        elif a == -1:
            prefix = "-"
        else:
            prefix = format_coefficient(a)
        parts.append(f"{prefix}x²")

    if b != 0:
        sign = "+" if b > 0 else "-"
        magnitude = "" if abs(b) == 1 else format_coefficient(abs(b))
        parts.append(f"{sign}{magnitude}x")

    if c != 0:
        sign = "+" if c > 0 else "-"
        parts.append(f"{sign}{format_coefficient(abs(c))}")

    if not parts:
        return "0"

    text = "".join(parts)
    # Only the a-term may lead unsigned; a leading b or c term keeps just its "-"
    return text[1:] if text.startswith("+") else text


def format_equation(a: float, b: float, c: float) -> str:
    return f"{format_polynomial(a, b, c)} = 0"


def format_complex_pair(result: Complex) -> tuple[str, str]:
    """Return the conjugate roots as display strings ("r + ii", "r - ii")."""
    real = format_number(result.real)
    imag = format_number(result.imaginary)
    return f"{real} + {imag}i", f"{real} - {imag}i"


def format_roots(result: RootResult) -> str:
    """One-line summary of a root result, as shown in the history list."""
    match result:
        case RealDistinct(x1=x1, x2=x2):
            return f"x₁={format_number(x1)}, x₂={format_number(x2)}"
        case RealDouble(x=x):
            return f"x={format_number(x)}"
        case Complex():
            first, second = format_complex_pair(result)
            return f"x₁={first}, x₂={second}"
        case _:
            raise TypeError(f"Unknown root result: {result!r}")


def format_fraction(
    value: float, max_denominator: int = MAX_FRACTION_DENOMINATOR
) -> str | None:
    """Return "p/q" when value is (within tolerance) a simple fraction.

    Returns None when the closest fraction needs a denominator above
    ``max_denominator``.

    Example:
        >>> format_fraction(0.75)
        '3/4'
        >>> format_fraction(math.pi) is None
        True
    """
    if not math.isfinite(value):
        return None
    frac = Fraction(value).limit_denominator(max_denominator)
    if abs(value - frac.numerator / frac.denominator) > abs(value) * FRACTION_TOLERANCE:
        return None
    return f"{frac.numerator}/{frac.denominator}"


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'} ago"


def time_ago(timestamp: datetime, now: datetime | None = None) -> str:
    """Relative age of a timestamp: "just now", "5 minutes ago", "1 day ago"."""
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    seconds = int((now - timestamp).total_seconds())
    if seconds < 60:
        return "just now"
    if seconds < 3600:
        return _plural(seconds // 60, "minute")
    if seconds < 86400:
        return _plural(seconds // 3600, "hour")
    return _plural(seconds // 86400, "day")
