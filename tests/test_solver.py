"""Unit tests for solver module."""

import math
import unittest

from quadratic_pkg.solver import (
    discriminant,
    evaluate_polynomial,
    exact_roots,
    solve,
    vertex,
)
from quadratic_pkg.types import (
    Complex,
    NotANumberError,
    RealDistinct,
    RealDouble,
    ValidationError,
    ZeroLeadingCoefficientError,
)


class TestRootClassification(unittest.TestCase):
    """Test discriminant-based classification."""

    def test_two_distinct_roots(self):
        result = solve(1, -3, 2)
        self.assertIsInstance(result, RealDistinct)
        self.assertEqual(result.x1, 2)
        self.assertEqual(result.x2, 1)
        self.assertEqual(result.delta, 1)

    def test_double_root(self):
        result = solve(1, 2, 1)
        self.assertIsInstance(result, RealDouble)
        self.assertEqual(result.x, -1)
        self.assertEqual(result.delta, 0)

    def test_complex_roots(self):
        result = solve(1, 0, 1)
        self.assertIsInstance(result, Complex)
        self.assertEqual(result.real, 0)
        self.assertEqual(result.imaginary, 1)
        self.assertEqual(result.delta, -4)

    def test_x1_uses_plus_branch_for_negative_a(self):
        # (-b + √Δ) / 2a is the smaller root when a < 0
        result = solve(-1, 0, 4)
        self.assertIsInstance(result, RealDistinct)
        self.assertEqual(result.x1, -2)
        self.assertEqual(result.x2, 2)

    def test_imaginary_part_is_magnitude_for_negative_a(self):
        result = solve(-1, 0, -1)
        self.assertIsInstance(result, Complex)
        self.assertEqual(result.imaginary, 1)

    def test_exact_zero_comparison_without_epsilon(self):
        # 0.2*0.2 is 0.04000000000000001 in binary floating point, so delta is a tiny positive
        result = solve(1, 0.2, 0.01)
        self.assertIsInstance(result, RealDistinct)
        self.assertGreater(result.delta, 0)
        self.assertLess(result.delta, 1e-15)

    def test_deterministic(self):
        self.assertEqual(solve(3.7, -1.1, -8.2), solve(3.7, -1.1, -8.2))

    def test_roots_satisfy_equation(self):
        a, b, c = 2.5, -7.25, 1.5
        result = solve(a, b, c)
        for root in result.real_roots():
            self.assertAlmostEqual(evaluate_polynomial(a, b, c, root), 0, places=9)


class TestValidation(unittest.TestCase):
    """Test defensive coefficient validation."""

    def test_zero_leading_coefficient(self):
        with self.assertRaises(ZeroLeadingCoefficientError) as ctx:
            solve(0, 2, 1)
        self.assertEqual(ctx.exception.code, "ZERO_LEADING_COEFFICIENT")

    def test_nan_coefficient(self):
        for args in [(math.nan, 1, 1), (1, math.nan, 1), (1, 1, math.nan)]:
            with self.assertRaises(NotANumberError):
                solve(*args)

    def test_infinite_coefficient(self):
        with self.assertRaises(NotANumberError) as ctx:
            solve(1, math.inf, 1)
        self.assertEqual(ctx.exception.code, "NOT_A_NUMBER")

    def test_non_numeric_coefficient(self):
        with self.assertRaises(NotANumberError):
            solve("1", 2, 3)
        with self.assertRaises(NotANumberError):
            solve(True, 2, 3)

    def test_nan_checked_before_zero(self):
        with self.assertRaises(NotANumberError):
            solve(0, math.nan, 1)

    def test_errors_share_base_class(self):
        with self.assertRaises(ValidationError):
            solve(0, 0, 0)


class TestVertexAndHelpers(unittest.TestCase):
    """Test vertex, discriminant and exact roots."""

    def test_vertex(self):
        self.assertEqual(vertex(1, -3, 2), (1.5, -0.25))
        self.assertEqual(vertex(1, 2, 1), (-1, 0))

    def test_vertex_rejects_zero_a(self):
        with self.assertRaises(ZeroLeadingCoefficientError):
            vertex(0, 1, 1)

    def test_discriminant(self):
        self.assertEqual(discriminant(1, -3, 2), 1)
        self.assertEqual(discriminant(2, 1, 3), -23)

    def test_exact_roots_radicals(self):
        self.assertEqual(exact_roots(1, 0, -2), ["-sqrt(2)", "sqrt(2)"])

    def test_exact_roots_complex(self):
        self.assertEqual(exact_roots(1, 0, 1), ["-I", "I"])

    def test_exact_roots_decimal_coefficients(self):
        # 0.5x² - 0.5 = 0 has roots ±1 exactly
        self.assertEqual(exact_roots(0.5, 0, -0.5), ["-1", "1"])


if __name__ == "__main__":
    unittest.main()
