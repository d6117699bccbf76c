"""Input parsing and validation module.

This module handles:
- Coefficient parsing from user text (plain numbers, decimal commas,
  constant expressions such as "sqrt(2)/2" or "-pi")
- Validation of the (a, b, c) triple before solving
- Extraction of coefficients from a spoken transcript
"""

from __future__ import annotations

import math
import re
from tokenize import TokenError

import sympy as sp
from sympy import parse_expr

from .config import (
    ALLOWED_SYMPY_NAMES,
    COEFFICIENT_CHARS_REGEX,
    DECIMAL_COMMA_REGEX,
    IDENTIFIER_REGEX,
    MAX_INPUT_LENGTH,
    TRANSCRIPT_CONNECTOR,
    TRANSCRIPT_NUMBER,
    TRANSFORMATIONS,
)
from .logging_config import get_logger
from .types import NotANumberError, ZeroLeadingCoefficientError

logger = get_logger("parser")

COEFFICIENT_NAMES = ("a", "b", "c")


def _transcript_pattern(name: str) -> re.Pattern[str]:
    # "igual a 2" must not read as coefficient a
    return re.compile(
        rf"(?<!\w)(?<!igual )(?:coefficient\s+|coeficiente\s+)?{name}\b"
        rf"{TRANSCRIPT_CONNECTOR}{TRANSCRIPT_NUMBER}",
        re.IGNORECASE,
    )


TRANSCRIPT_PATTERNS = {name: _transcript_pattern(name) for name in COEFFICIENT_NAMES}


def _parse_constant_expression(text: str, name: str) -> float:
    """Evaluate a symbol-free expression such as "1/3" or "sqrt(2)"."""
    if not COEFFICIENT_CHARS_REGEX.match(text) or "__" in text:
        raise NotANumberError(f'Coefficient "{name}" is not a valid number: {text!r}')
    for identifier in IDENTIFIER_REGEX.findall(text):
        if identifier not in ALLOWED_SYMPY_NAMES:
            raise NotANumberError(
                f'Coefficient "{name}" contains unknown name {identifier!r}'
            )
    try:
        expr = parse_expr(
            text,
            local_dict=dict(ALLOWED_SYMPY_NAMES),
            transformations=TRANSFORMATIONS,
            evaluate=True,
        )
    except (SyntaxError, TypeError, ValueError, AttributeError, IndexError, TokenError) as e:
        raise NotANumberError(f'Coefficient "{name}" could not be parsed: {text!r}') from e

    if not isinstance(expr, sp.Basic) or expr.free_symbols:
        raise NotANumberError(f'Coefficient "{name}" must be a constant: {text!r}')
    try:
        value = float(sp.N(expr))
    except (TypeError, ValueError, OverflowError) as e:
        # Complex, undefined or huge values (e.g. sqrt(-1)) land here
        raise NotANumberError(f'Coefficient "{name}" is not a real number: {text!r}') from e
    logger.debug(f"Parsed coefficient {name}={text!r} as {value}")
    return value


def parse_coefficient(text: str | float, name: str = "a") -> float:
    """Parse one coefficient.

    Args:
        text: User input; numbers are passed through after a finiteness check
        name: Coefficient name used in error messages

    Returns:
        Finite float value

    Raises:
        NotANumberError: If the input is empty, non-numeric, NaN or infinite
    """
    if isinstance(text, bool):
        raise NotANumberError(f'Coefficient "{name}" must be a number, got bool')
    if isinstance(text, (int, float)):
        value = float(text)
    else:
        raw = str(text).strip()
        if not raw:
            raise NotANumberError(f'Coefficient "{name}" is empty')
        if len(raw) > MAX_INPUT_LENGTH:
            raise NotANumberError(
                f'Coefficient "{name}" is too long ({len(raw)} > {MAX_INPUT_LENGTH} characters)'
            )
        if DECIMAL_COMMA_REGEX.match(raw):
            raw = raw.replace(",", ".")
        try:
            value = float(raw)
        except ValueError:
            value = _parse_constant_expression(raw, name)

    if not math.isfinite(value):
        raise NotANumberError(f'Coefficient "{name}" must be finite, got {value}')
    return value


def parse_coefficients(
    a: str | float, b: str | float, c: str | float
) -> tuple[float, float, float]:
    """Parse and validate a full (a, b, c) triple.

    Raises:
        NotANumberError: If any coefficient is not a finite number
        ZeroLeadingCoefficientError: If a parses to 0
    """
    values = tuple(
        parse_coefficient(raw, name) for raw, name in zip((a, b, c), COEFFICIENT_NAMES)
    )
    if values[0] == 0:
        raise ZeroLeadingCoefficientError()
    return values  # type: ignore[return-value]


def parse_transcript(transcript: str) -> dict[str, float]:
    """Extract coefficients from free text.

    Examples:
        >>> parse_transcript("a equals 2, b is minus 3, c 5")
        {'a': 2.0, 'b': -3.0, 'c': 5.0}
        >>> parse_transcript("a igual a 2, b igual a -3")
        {'a': 2.0, 'b': -3.0}
    """
    found: dict[str, float] = {}
    for name, pattern in TRANSCRIPT_PATTERNS.items():
        match = pattern.search(transcript)
        if not match:
            continue
        value = float(match.group("number").replace(",", "."))
        if match.group("sign"):
            value = -value
        found[name] = value
    logger.debug(f"Transcript {transcript!r} yielded {found}")
    return found
