"""Step-by-step explanation of a solved quadratic equation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .formatting import (
    format_complex_pair,
    format_equation,
    format_fraction,
    format_number,
    format_polynomial,
)
from .solver import exact_roots, vertex
from .types import Complex, RealDistinct, RealDouble, RootResult


@dataclass
class Explanation:
    """Everything a presentation layer needs to describe one solution."""

    equation: str
    status_level: str
    status_icon: str
    status_text: str
    steps: list[str] = field(default_factory=list)
    interpretation: list[str] = field(default_factory=list)
    vertex: tuple[float, float] = (0.0, 0.0)
    exact: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "equation": self.equation,
            "status": {
                "level": self.status_level,
                "icon": self.status_icon,
                "text": self.status_text,
            },
            "steps": self.steps,
            "interpretation": self.interpretation,
            "vertex": {"x": self.vertex[0], "y": self.vertex[1]},
            "exact": self.exact,
        }


def status(result: RootResult) -> tuple[str, str, str]:
    """Return (level, icon, text) for the result badge."""
    match result:
        case RealDistinct():
            return "success", "✓", "Two distinct real roots"
        case RealDouble():
            return "warning", "○", "One real root (double)"
        case Complex():
            return "error", "♢", "Complex roots"
        case _:
            raise TypeError(f"Unknown root result: {result!r}")


def _with_fraction(value: float) -> str:
    text = format_number(value)
    frac = format_fraction(value)
    if frac is None or frac.endswith("/1"):
        return text
    return f"{text} ({frac})"


def calculation_steps(
    a: float, b: float, c: float, result: RootResult, exact: list[str] | None = None
) -> list[str]:
    """Bhaskara's formula applied to (a, b, c), one line per step."""
    a_str = format_number(a)
    b_str = format_number(b)
    c_str = format_number(c)
    delta_str = format_number(result.delta)
    minus_b = format_number(-b)
    two_a = format_number(2 * a)

    steps = [
        f"Equation: {format_equation(a, b, c)}",
        f"Discriminant (Δ): Δ = b² - 4ac = ({b_str})² - 4({a_str})({c_str}) = {delta_str}",
    ]

    match result:
        case RealDistinct(x1=x1, x2=x2):
            steps += [
                "Bhaskara's formula: x = (-b ± √Δ) / 2a",
                f"x₁ = (-b + √Δ) / 2a = ({minus_b} + √{delta_str}) / {two_a} = {_with_fraction(x1)}",
                f"x₂ = (-b - √Δ) / 2a = ({minus_b} - √{delta_str}) / {two_a} = {_with_fraction(x2)}",
            ]
        case RealDouble(x=x):
            steps.append(
                f"Since Δ = 0: x = -b / 2a = {minus_b} / {two_a} = {_with_fraction(x)}"
            )
        case Complex(real=real, imaginary=imaginary):
            first, second = format_complex_pair(result)
            steps += [
                "Since Δ < 0: the roots are complex",
                f"Real part: -b / 2a = {minus_b} / {two_a} = {format_number(real)}",
                f"Imaginary part: √|Δ| / 2a = √{format_number(abs(result.delta))} / {two_a} = {format_number(imaginary)}",
                f"Roots: x₁ = {first}, x₂ = {second}",
            ]
        case _:
            raise TypeError(f"Unknown root result: {result!r}")

    if exact is None:
        exact = exact_roots(a, b, c)
    if exact:
        steps.append(f"Exact form: {', '.join(exact)}")
    return steps


def interpretation(result: RootResult) -> list[str]:
    """Geometric meaning of the discriminant sign."""
    match result:
        case RealDistinct():
            return [
                "When Δ > 0 the parabola crosses the x-axis at two different points, "
                "so the equation has two distinct real solutions.",
                "Tip: the parabola y = ax² + bx + c is positive (a > 0) or negative "
                "(a < 0) far from the vertex.",
            ]
        case RealDouble():
            return [
                "When Δ = 0 the parabola is tangent to the x-axis, touching it at a "
                "single point, so the equation has one real (double) root.",
                "Tip: the vertex lies exactly on the x-axis in this case.",
            ]
        case Complex():
            return [
                "When Δ < 0 the parabola never crosses the x-axis; it stays entirely "
                "above (a > 0) or below (a < 0) it.",
                "Complex roots come in conjugate pairs and matter in many areas of "
                "mathematics and engineering.",
            ]
        case _:
            raise TypeError(f"Unknown root result: {result!r}")


def explain(a: float, b: float, c: float, result: RootResult) -> Explanation:
    """Bundle status, steps, interpretation and vertex for one solution."""
    level, icon, text = status(result)
    exact = exact_roots(a, b, c)
    return Explanation(
        equation=f"y = {format_polynomial(a, b, c)}",
        status_level=level,
        status_icon=icon,
        status_text=text,
        steps=calculation_steps(a, b, c, result, exact),
        interpretation=interpretation(result),
        vertex=vertex(a, b, c),
        exact=exact,
    )
