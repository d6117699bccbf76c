"""Fuzzing tests for the parser and solver with random inputs."""

import cmath
import math
import random
import string
import unittest

from quadratic_pkg.parser import parse_coefficient, parse_transcript
from quadratic_pkg.solver import solve
from quadratic_pkg.types import Complex, NotANumberError, RealDistinct, RealDouble

# Exponentiation is left out so random input cannot request huge powers
SAFE_CHARS = "".join(ch for ch in string.ascii_letters + string.digits + string.punctuation + " " if ch not in "*^")


class TestParserFuzzing(unittest.TestCase):
    """Fuzz test parser with random inputs."""

    def setUp(self):
        self.rng = random.Random(1234)

    def test_random_strings(self):
        """Every input either parses to a finite float or raises NotANumberError."""
        for _ in range(300):
            text = "".join(self.rng.choices(SAFE_CHARS, k=self.rng.randint(1, 30)))
            try:
                value = parse_coefficient(text)
            except NotANumberError:
                continue
            self.assertTrue(math.isfinite(value), text)

    def test_malformed_expressions(self):
        for text in ["(((", ")))", "1++", "*/1", "sqrt(", "pi pi (", ",5"]:
            with self.subTest(text=text):
                with self.assertRaises(NotANumberError):
                    parse_coefficient(text)

    def test_random_transcripts(self):
        words = ["a", "b", "c", "equals", "is", "minus", "igual", "vale", "2", "-3", "4,5", "x"]
        for _ in range(200):
            transcript = " ".join(self.rng.choices(words, k=self.rng.randint(0, 10)))
            found = parse_transcript(transcript)
            self.assertLessEqual(set(found), {"a", "b", "c"})
            for value in found.values():
                self.assertTrue(math.isfinite(value))


class TestSolverFuzzing(unittest.TestCase):
    """Random integer coefficients: classification and residuals."""

    def setUp(self):
        self.rng = random.Random(42)

    def _coefficients(self):
        a = 0
        while a == 0:
            a = self.rng.randint(-50, 50)
        return a, self.rng.randint(-50, 50), self.rng.randint(-50, 50)

    def test_classification_matches_discriminant(self):
        for _ in range(500):
            a, b, c = self._coefficients()
            result = solve(a, b, c)
            delta = b * b - 4 * a * c
            self.assertEqual(result.delta, delta)
            if delta > 0:
                self.assertIsInstance(result, RealDistinct)
            elif delta == 0:
                self.assertIsInstance(result, RealDouble)
            else:
                self.assertIsInstance(result, Complex)
                self.assertGreater(result.imaginary, 0)

    def test_roots_satisfy_equation(self):
        for _ in range(500):
            a, b, c = self._coefficients()
            result = solve(a, b, c)
            if isinstance(result, Complex):
                roots = [complex(result.real, result.imaginary), complex(result.real, -result.imaginary)]
            else:
                roots = list(result.real_roots())
            for x in roots:
                residual = a * x * x + b * x + c
                scale = abs(a) * abs(x) ** 2 + abs(b) * abs(x) + abs(c) + 1
                self.assertLess(cmath.polar(residual)[0], 1e-9 * scale, (a, b, c, x))

    def test_perfect_squares_give_double_root(self):
        for _ in range(100):
            r = self.rng.randint(-20, 20)
            k = self.rng.choice([1, 2, 3, -1, -4])
            # k(x - r)² = kx² - 2krx + kr²
            result = solve(k, -2 * k * r, k * r * r)
            self.assertIsInstance(result, RealDouble)
            self.assertEqual(result.x, r)


if __name__ == "__main__":
    unittest.main()
