"""Test that API functions return typed dataclasses."""

from quadratic_pkg.api import explain_equation, solve_equation, validate_coefficients
from quadratic_pkg.explain import Explanation
from quadratic_pkg.types import Complex, RealDistinct, RealDouble, SolveResult


class TestAPITypedReturns:
    """Test that all API functions return typed dataclasses."""

    def test_solve_equation_returns_solve_result(self):
        """Test that solve_equation() returns SolveResult."""
        result = solve_equation(1, -3, 2)
        assert isinstance(result, SolveResult)
        assert result.ok is True
        assert isinstance(result.result, RealDistinct)
        assert result.coefficients == (1.0, -3.0, 2.0)
        assert result.extras["summary"] == "x₁=2, x₂=1"

    def test_solve_equation_accepts_strings(self):
        result = solve_equation("1", "2", "1")
        assert result.ok is True
        assert result.result == RealDouble(delta=0.0, x=-1.0)

    def test_solve_equation_complex(self):
        result = solve_equation(1, 0, 1)
        assert isinstance(result.result, Complex)
        assert result.result.imaginary == 1.0

    def test_solve_equation_error_returns_solve_result(self):
        """Test that solve_equation() errors return SolveResult."""
        result = solve_equation("x", 1, 1)
        assert isinstance(result, SolveResult)
        assert result.ok is False
        assert result.result is None
        assert result.error_code == "NOT_A_NUMBER"

    def test_to_dict(self):
        data = solve_equation(1, -3, 2).to_dict()
        assert data["ok"] is True
        assert data["coefficients"] == {"a": 1.0, "b": -3.0, "c": 2.0}
        assert data["result"]["type"] == "real-distinct"
        assert data["summary"] == "x₁=2, x₂=1"

        failed = solve_equation(0, 1, 1).to_dict()
        assert failed["ok"] is False
        assert failed["error_code"] == "ZERO_LEADING_COEFFICIENT"
        assert "result" not in failed

    def test_repr(self):
        assert "ok=False" in repr(solve_equation(0, 1, 1))
        assert "RealDistinct" in repr(solve_equation(1, -3, 2))

    def test_explain_equation(self):
        solved, explanation = explain_equation(1, -3, 2)
        assert solved.ok is True
        assert isinstance(explanation, Explanation)
        assert explanation.status_level == "success"

    def test_explain_equation_error(self):
        solved, explanation = explain_equation(0, 0, 0)
        assert solved.ok is False
        assert explanation is None

    def test_validate_coefficients(self):
        assert validate_coefficients(1, 2, 3) == (True, None)
        ok, message = validate_coefficients(0, 2, 3)
        assert ok is False
        assert "cannot be zero" in message
