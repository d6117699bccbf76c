"""Public API for the quadratic solver - returns structured objects without raising."""

from __future__ import annotations

from .explain import Explanation, explain
from .formatting import format_number, format_polynomial, format_roots
from .logging_config import get_logger
from .parser import parse_coefficients
from .solver import solve, vertex
from .types import SolveResult, ValidationError

logger = get_logger("api")

__all__ = [
    "solve_equation",
    "explain_equation",
    "validate_coefficients",
    "vertex",
    "format_number",
    "format_polynomial",
]


def solve_equation(a: str | float, b: str | float, c: str | float) -> SolveResult:
    """Solve ax² + bx + c = 0.

    Args:
        a, b, c: Coefficients as numbers or numeric strings ("2", "-0.5", "sqrt(2)")

    Returns:
        SolveResult with the classified roots, or ok=False with an error code
        (NOT_A_NUMBER or ZERO_LEADING_COEFFICIENT)

    Example:
        >>> from quadratic_pkg.api import solve_equation
        >>> result = solve_equation(1, -3, 2)
        >>> result.result
        RealDistinct(delta=1.0, x1=2.0, x2=1.0)
        >>> solve_equation(0, 1, 1).error_code
        'ZERO_LEADING_COEFFICIENT'
    """
    try:
        coefficients = parse_coefficients(a, b, c)
        result = solve(*coefficients)
    except ValidationError as e:
        logger.info(f"Rejected coefficients ({a!r}, {b!r}, {c!r}): {e}")
        return SolveResult(ok=False, error=e.message, error_code=e.code)
    return SolveResult(
        ok=True,
        result=result,
        coefficients=coefficients,
        extras={"summary": format_roots(result)},
    )


def explain_equation(
    a: str | float, b: str | float, c: str | float
) -> tuple[SolveResult, Explanation | None]:
    """Solve and build the step-by-step explanation in one call."""
    solved = solve_equation(a, b, c)
    if not solved.ok:
        return solved, None
    return solved, explain(*solved.coefficients, solved.result)


def validate_coefficients(
    a: str | float, b: str | float, c: str | float
) -> tuple[bool, str | None]:
    """Validate coefficients without solving.

    Returns:
        Tuple of (is_valid, error_message)
    """
    try:
        parse_coefficients(a, b, c)
        return True, None
    except ValidationError as e:
        return False, e.message
