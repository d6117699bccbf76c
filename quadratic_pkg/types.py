"""Type definitions, result dataclasses and errors for consistent API responses."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Union


@dataclass(frozen=True)
class RealDistinct:
    """Two distinct real roots (delta > 0). x1 always comes from the +sqrt branch."""

    delta: float
    x1: float
    x2: float

    kind = "real-distinct"

    def real_roots(self) -> tuple[float, ...]:
        return (self.x1, self.x2)

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind, "delta": self.delta, "x1": self.x1, "x2": self.x2}


@dataclass(frozen=True)
class RealDouble:
    """A single real root of multiplicity two (delta == 0)."""

    delta: float
    x: float

    kind = "real-equal"

    def real_roots(self) -> tuple[float, ...]:
        return (self.x,)

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind, "delta": self.delta, "x": self.x}


@dataclass(frozen=True)
class Complex:
    """A conjugate pair real ± imaginary·i (delta < 0).

    ``imaginary`` is always stored as a non-negative magnitude.
    """

    delta: float
    real: float
    imaginary: float

    kind = "complex"

    def real_roots(self) -> tuple[float, ...]:
        return ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.kind,
            "delta": self.delta,
            "real": self.real,
            "imaginary": self.imaginary,
        }


RootResult = Union[RealDistinct, RealDouble, Complex]

_ROOT_RESULT_KINDS: dict[str, type] = {
    RealDistinct.kind: RealDistinct,
    RealDouble.kind: RealDouble,
    Complex.kind: Complex,
}


def root_result_from_dict(data: dict[str, Any]) -> RootResult:
    """Rebuild a RootResult variant from its ``to_dict`` form.

    Raises:
        ValueError: If the tag is unknown or a field is missing/non-numeric
    """
    if not isinstance(data, dict):
        raise ValueError(f"Root result must be an object, got {type(data).__name__}")
    kind = data.get("type")
    cls = _ROOT_RESULT_KINDS.get(kind)
    if cls is None:
        raise ValueError(f"Unknown root result type: {kind!r}")
    try:
        if cls is RealDistinct:
            return RealDistinct(
                delta=float(data["delta"]), x1=float(data["x1"]), x2=float(data["x2"])
            )
        if cls is RealDouble:
            return RealDouble(delta=float(data["delta"]), x=float(data["x"]))
        return Complex(
            delta=float(data["delta"]),
            real=float(data["real"]),
            imaginary=float(data["imaginary"]),
        )
    except (KeyError, TypeError, ValueError, OverflowError) as e:
        raise ValueError(f"Malformed {kind} root result: {e}") from e


@dataclass(frozen=True)
class HistoryEntry:
    """One persisted past computation. Created at solve time, never mutated."""

    id: str
    a: float
    b: float
    c: float
    result: RootResult
    created_at: datetime

    @property
    def equation(self) -> str:
        from .formatting import format_equation

        return format_equation(self.a, self.b, self.c)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "a": self.a,
            "b": self.b,
            "c": self.c,
            "result": self.result.to_dict(),
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> HistoryEntry:
        """Rebuild an entry from ``to_dict`` output.

        Entries only ever come from a validated solve, so coefficients that
        could not have been solved (non-finite, or a == 0) are rejected too.

        Raises:
            ValueError: If any field is missing or malformed
        """
        if not isinstance(data, dict):
            raise ValueError(f"History entry must be an object, got {type(data).__name__}")
        try:
            entry = cls(
                id=str(data["id"]),
                a=float(data["a"]),
                b=float(data["b"]),
                c=float(data["c"]),
                result=root_result_from_dict(data["result"]),
                created_at=datetime.fromisoformat(data["created_at"]),
            )
        except (KeyError, TypeError, ValueError, OverflowError) as e:
            raise ValueError(f"Malformed history entry: {e}") from e
        if not all(math.isfinite(v) for v in (entry.a, entry.b, entry.c)):
            raise ValueError(f"History entry {entry.id!r} has non-finite coefficients")
        if entry.a == 0:
            raise ValueError(f'History entry {entry.id!r} has coefficient "a" equal to zero')
        return entry


@dataclass
class SolveResult:
    """Result of solving a quadratic equation through the public API."""

    ok: bool
    result: RootResult | None = None
    coefficients: tuple[float, float, float] | None = None
    error: str | None = None
    error_code: str | None = None
    extras: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.coefficients is not None:
            a, b, c = self.coefficients
            result_dict["coefficients"] = {"a": a, "b": b, "c": c}
        if self.result is not None:
            result_dict["result"] = self.result.to_dict()
        if self.error is not None:
            result_dict["error"] = self.error
        if self.error_code is not None:
            result_dict["error_code"] = self.error_code
        result_dict.update(self.extras)
        return result_dict

    def __repr__(self) -> str:
        """Return string representation of the result."""
        if not self.ok:
            return f"SolveResult(ok=False, error={self.error!r}, error_code={self.error_code!r})"
        parts = [f"ok={self.ok}"]
        if self.coefficients is not None:
            parts.append(f"coefficients={self.coefficients!r}")
        if self.result is not None:
            parts.append(f"result={self.result!r}")
        return f"SolveResult({', '.join(parts)})"


class ValidationError(Exception):
    """Raised when input validation fails."""

    def __init__(self, message: str, code: str = "VALIDATION_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class NotANumberError(ValidationError):
    """Raised when a coefficient is missing, non-numeric, NaN or infinite."""

    def __init__(self, message: str = "Please enter a valid number"):
        super().__init__(message, code="NOT_A_NUMBER")


class ZeroLeadingCoefficientError(ValidationError):
    """Raised when ``a == 0``; the equation would be linear, not quadratic."""

    def __init__(
        self,
        message: str = 'Coefficient "a" cannot be zero (the equation would be linear)',
    ):
        super().__init__(message, code="ZERO_LEADING_COEFFICIENT")


class PlottingError(Exception):
    """Raised when a plot cannot be produced."""

    def __init__(self, message: str, code: str = "PLOTTING_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message
