"""Core quadratic solving module.

This module provides:
- Coefficient validation (finite reals, non-zero leading coefficient)
- Discriminant-based root classification into RootResult variants
- Parabola vertex and point evaluation
- Exact (radical) roots through SymPy for explanations

The discriminant is computed as b*b - 4*a*c with no compensation for
cancellation when b² ≈ 4ac, and delta == 0 is an exact comparison. Results
near that boundary therefore match plain floating-point arithmetic bit for bit.
"""

from __future__ import annotations

import math
from numbers import Real

import sympy as sp

from .logging_config import get_logger
from .types import (
    Complex,
    NotANumberError,
    RealDistinct,
    RealDouble,
    RootResult,
    ZeroLeadingCoefficientError,
)

logger = get_logger("solver")


def _check_finite(**coefficients: object) -> None:
    for name, value in coefficients.items():
        if isinstance(value, bool) or not isinstance(value, Real):
            raise NotANumberError(
                f'Coefficient "{name}" must be a number, got {type(value).__name__}'
            )
        if not math.isfinite(value):
            raise NotANumberError(f'Coefficient "{name}" must be finite, got {value}')


def validate_coefficients(a: float, b: float, c: float) -> None:
    """Validate coefficients before solving.

    Raises:
        NotANumberError: If any coefficient is not a finite real number
        ZeroLeadingCoefficientError: If a == 0
    """
    _check_finite(a=a, b=b, c=c)
    if a == 0:
        raise ZeroLeadingCoefficientError()


def discriminant(a: float, b: float, c: float) -> float:
    """Return delta = b² - 4ac."""
    return b * b - 4 * a * c


def solve(a: float, b: float, c: float) -> RootResult:
    """Solve ax² + bx + c = 0.

    Args:
        a: Leading coefficient (must be non-zero)
        b: Linear coefficient
        c: Constant term

    Returns:
        RealDistinct when delta > 0 (x1 uses the +sqrt branch),
        RealDouble when delta == 0 exactly,
        Complex when delta < 0 (imaginary part as a non-negative magnitude)

    Raises:
        NotANumberError: If any coefficient is not a finite real number
        ZeroLeadingCoefficientError: If a == 0

    Example:
        >>> solve(1, -3, 2)
        RealDistinct(delta=1, x1=2.0, x2=1.0)
    """
    validate_coefficients(a, b, c)

    delta = discriminant(a, b, c)
    if delta > 0:
        root = math.sqrt(delta)
        result: RootResult = RealDistinct(
            delta=delta, x1=(-b + root) / (2 * a), x2=(-b - root) / (2 * a)
        )
    elif delta == 0:
        result = RealDouble(delta=delta, x=-b / (2 * a))
    else:
        result = Complex(
            delta=delta,
            real=-b / (2 * a),
            imaginary=abs(math.sqrt(abs(delta)) / (2 * a)),
        )

    logger.debug(f"Solved a={a}, b={b}, c={c}: {result.kind} (delta={delta})")
    return result


def evaluate_polynomial(a: float, b: float, c: float, x: float) -> float:
    """Return a·x² + b·x + c."""
    return a * x * x + b * x + c


def vertex(a: float, b: float, c: float) -> tuple[float, float]:
    """Return the parabola vertex (-b/2a, a·vx² + b·vx + c).

    Raises:
        ZeroLeadingCoefficientError: If a == 0
    """
    if a == 0:
        raise ZeroLeadingCoefficientError()
    vx = -b / (2 * a)
    return vx, evaluate_polynomial(a, b, c, vx)


def exact_roots(a: float, b: float, c: float) -> list[str]:
    """Return the roots in closed form using rational coefficients.

    Each float is converted through its decimal string, so 0.1 becomes 1/10
    rather than its binary expansion.

    Example:
        >>> exact_roots(1, 0, -2)
        ['-sqrt(2)', 'sqrt(2)']
    """
    validate_coefficients(a, b, c)
    x = sp.Symbol("x")
    ra, rb, rc = (sp.Rational(str(v)) for v in (a, b, c))
    try:
        solutions = sp.solve(ra * x**2 + rb * x + rc, x)
    except (NotImplementedError, ValueError, TypeError) as e:
        logger.warning(f"Exact solve failed for a={a}, b={b}, c={c}: {e}")
        return []
    return [str(s) for s in solutions]
