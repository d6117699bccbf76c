"""Plotting of the parabola with its roots and vertex.

The sampled data (curve points and markers) is pure and always available.
Image output needs matplotlib; an ASCII rendering works without it.
"""

from __future__ import annotations

import math

import numpy as np

try:
    # Set non-GUI backend before importing pyplot to avoid Tkinter issues
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    HAS_MATPLOTLIB = True
except ImportError:
    HAS_MATPLOTLIB = False

from .config import (
    ASCII_PLOT_COLS,
    ASCII_PLOT_ROWS,
    DEFAULT_THEME,
    PLOT_STEP,
    PLOT_X_MAX,
    PLOT_X_MIN,
)
from .formatting import format_number, format_polynomial
from .logging_config import get_logger
from .solver import vertex
from .types import Complex, PlottingError, RealDistinct, RealDouble, RootResult

logger = get_logger("plotting")

THEME_COLORS = {
    "dark": {
        "line": "#007AFF",
        "point": "#34C759",
        "axis": "#8E8E93",
        "grid": "#2C2C2E",
        "background": "#1C1C1E",
        "text": "#E4E4E7",
    },
    "light": {
        "line": "#0062CC",
        "point": "#28A745",
        "axis": "#6C757D",
        "grid": "#E9ECEF",
        "background": "#FFFFFF",
        "text": "#212529",
    },
}


def sample_curve(
    a: float,
    b: float,
    c: float,
    x_min: float = PLOT_X_MIN,
    x_max: float = PLOT_X_MAX,
    step: float = PLOT_STEP,
) -> list[tuple[float, float]]:
    """Sample y = ax² + bx + c at x_min, x_min + step, ..., x_max.

    Points are computed as x_min + i*step so that rounding does not
    accumulate across the domain.
    """
    if step <= 0:
        raise ValueError(f"Plot step must be positive, got {step}")
    if x_max < x_min:
        raise ValueError(f"Empty plot domain [{x_min}, {x_max}]")
    count = int(round((x_max - x_min) / step)) + 1
    xs = x_min + np.arange(count) * step
    ys = a * xs * xs + b * xs + c
    return [(float(x), float(y)) for x, y in zip(xs, ys)]


def markers(a: float, b: float, c: float, result: RootResult) -> dict:
    """Points to highlight: real roots on the x-axis and the vertex."""
    return {
        "roots": [(x, 0.0) for x in result.real_roots()],
        "vertex": vertex(a, b, c),
    }


def legend_labels(a: float, b: float, c: float, result: RootResult) -> list[str]:
    """Legend lines describing the curve, the vertex and the x-axis crossings."""
    vx, vy = vertex(a, b, c)
    labels = [
        f"Parabola y = {format_polynomial(a, b, c)}",
        f"Vertex ({format_number(vx)}, {format_number(vy)})",
    ]
    match result:
        case RealDistinct():
            labels.append("Real roots on the x-axis")
        case RealDouble():
            labels.append("Real root on the x-axis")
        case Complex():
            labels.append("No real intersections with the x-axis")
    return labels


def ascii_plot(
    a: float,
    b: float,
    c: float,
    result: RootResult,
    x_min: float = PLOT_X_MIN,
    x_max: float = PLOT_X_MAX,
    rows: int = ASCII_PLOT_ROWS,
    cols: int = ASCII_PLOT_COLS,
) -> str:
    """Render the parabola as text.

    ``*`` marks the curve, ``o`` the real roots and ``V`` the vertex.
    """
    step = (x_max - x_min) / (cols - 1)
    points = sample_curve(a, b, c, x_min, x_max, step)
    marks = markers(a, b, c, result)

    # Huge coefficients can overflow samples to inf; they are left off the plot
    ys = [y for _, y in points if math.isfinite(y)] + [0.0]
    vx, vy = marks["vertex"]
    if x_min <= vx <= x_max and math.isfinite(vy):
        ys.append(vy)
    y_min, y_max = min(ys), max(ys)
    # Halved so the span of two huge finite values cannot itself overflow
    half_range = y_max / 2 - y_min / 2 if y_max != y_min else 0.5

    def to_cell(x: float, y: float) -> tuple[int, int] | None:
        if not (x_min <= x <= x_max and y_min <= y <= y_max):
            return None
        col = int(round((x - x_min) / (x_max - x_min) * (cols - 1)))
        row = int(round((y_max / 2 - y / 2) / half_range * (rows - 1)))
        return row, col

    grid = [[" " for _ in range(cols)] for _ in range(rows)]

    # Axes
    axis_row = to_cell(x_min, 0.0)
    axis_col = to_cell(0.0, y_min) if x_min <= 0 <= x_max else None
    if axis_row is not None:
        for col in range(cols):
            grid[axis_row[0]][col] = "-"
    if axis_col is not None:
        for row in range(rows):
            grid[row][axis_col[1]] = "+" if grid[row][axis_col[1]] == "-" else "|"

    for x, y in points:
        cell = to_cell(x, y)
        if cell is not None:
            grid[cell[0]][cell[1]] = "*"
    for x, y in marks["roots"]:
        cell = to_cell(x, y)
        if cell is not None:
            grid[cell[0]][cell[1]] = "o"
    cell = to_cell(*marks["vertex"])
    if cell is not None:
        grid[cell[0]][cell[1]] = "V"

    lines = ["".join(row) for row in grid]
    lines += legend_labels(a, b, c, result)
    return "\n".join(lines)


def _open_file_in_viewer(file_path: str) -> bool:
    """Open a file in the system's default application (cross-platform)."""
    import os
    import subprocess
    import sys

    try:
        if sys.platform == "win32":
            os.startfile(file_path)
        elif sys.platform == "darwin":
            subprocess.run(["open", file_path], check=True)
        else:
            subprocess.run(["xdg-open", file_path], check=True)
        return True
    except (OSError, subprocess.CalledProcessError) as e:
        logger.info(f"Could not open {file_path} in a viewer: {e}")
        return False


def plot_equation(
    a: float,
    b: float,
    c: float,
    result: RootResult,
    path: str | None = None,
    theme: str = DEFAULT_THEME,
    open_viewer: bool = False,
) -> str:
    """Save a PNG of the parabola with root and vertex markers.

    Args:
        a, b, c: Coefficients
        result: Root result for (a, b, c)
        path: Output file; a temporary .png is created when omitted
        theme: "light" or "dark" color scheme
        open_viewer: Open the saved image in the default viewer

    Returns:
        Path of the saved image

    Raises:
        PlottingError: If matplotlib is missing or the image cannot be written
    """
    if not HAS_MATPLOTLIB:
        raise PlottingError(
            "matplotlib not installed. Use the ASCII plot instead.",
            code="MATPLOTLIB_MISSING",
        )
    colors = THEME_COLORS.get(theme, THEME_COLORS["dark"])

    points = sample_curve(a, b, c)
    marks = markers(a, b, c, result)
    labels = legend_labels(a, b, c, result)

    fig, ax = plt.subplots(figsize=(10, 6))
    try:
        fig.patch.set_facecolor(colors["background"])
        ax.set_facecolor(colors["background"])
        ax.plot(
            [x for x, _ in points],
            [y for _, y in points],
            linewidth=2.5,
            color=colors["line"],
            label=labels[0],
        )
        if marks["roots"]:
            ax.scatter(
                [x for x, _ in marks["roots"]],
                [y for _, y in marks["roots"]],
                s=80,
                color=colors["point"],
                zorder=3,
                label=labels[2],
            )
        vx, vy = marks["vertex"]
        ax.scatter([vx], [vy], s=50, color=colors["point"], marker="D", zorder=3, label=labels[1])

        ax.set_xlabel("x", color=colors["axis"])
        ax.set_ylabel("y", color=colors["axis"])
        ax.tick_params(colors=colors["axis"])
        ax.grid(True, color=colors["grid"])
        ax.axhline(y=0, color=colors["axis"], linewidth=0.8, alpha=0.5)
        ax.axvline(x=0, color=colors["axis"], linewidth=0.8, alpha=0.5)
        ax.set_title(f"{labels[0]}  ({labels[-1]})", color=colors["text"])
        ax.legend(loc="best", fontsize=10)
        plt.tight_layout()

        if path is None:
            import tempfile

            temp_file = tempfile.NamedTemporaryFile(suffix=".png", delete=False)
            path = temp_file.name
            temp_file.close()
        fig.savefig(path, dpi=150, bbox_inches="tight", facecolor=colors["background"])
    except OSError as e:
        raise PlottingError(f"Failed to save plot: {e}", code="PLOT_SAVE_FAILED") from e
    finally:
        plt.close(fig)

    logger.info(f"Plot saved to {path}")
    if open_viewer:
        _open_file_in_viewer(path)
    return path
