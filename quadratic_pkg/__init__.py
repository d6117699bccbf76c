"""Quadratic solver package: solver, formatting, history, plotting, and CLI."""

__all__ = [
    "config",
    "types",
    "solver",
    "formatting",
    "explain",
    "history",
    "storage",
    "parser",
    "plotting",
    "context",
    "api",
    "cli",
    "logging_config",
]

# Public API exports

__api_exports__ = [
    "solve_equation",
    "explain_equation",
    "validate_coefficients",
    "vertex",
    "format_number",
    "format_polynomial",
]
