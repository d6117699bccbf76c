"""Command-line interface for the quadratic solver.

Examples:
    python -m quadratic_pkg solve 1 -3 2 --steps
    python -m quadratic_pkg solve 1 0 1 --ascii
    python -m quadratic_pkg history list
    python -m quadratic_pkg theme toggle
    python -m quadratic_pkg voice "a equals 2, b is minus 3, c is 1"
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from .config import VERSION
from .context import AppContext
from .explain import explain
from .formatting import format_equation, format_number, format_roots, time_ago
from .logging_config import get_logger, setup_logging
from .parser import parse_coefficients, parse_transcript
from .plotting import ascii_plot, plot_equation
from .storage import JsonFileStore
from .types import HistoryEntry, PlottingError, ValidationError

logger = get_logger("cli")


def _health_check() -> int:
    """Run health check to verify dependencies and basic operations.

    Returns:
        Exit code (0 for success, non-zero for failures)
    """
    checks_passed = 0
    checks_failed = 0

    print("Running quadratic solver health check...")
    print("-" * 50)

    try:
        import sympy as sp

        print(f"[OK] SymPy {sp.__version__} imported successfully")
        checks_passed += 1
    except ImportError as e:
        print(f"[FAIL] SymPy import failed: {e}")
        checks_failed += 1

    try:
        from .solver import solve

        result = solve(1, -3, 2)
        if result.real_roots() == (2.0, 1.0):
            print("[OK] Basic solving works")
            checks_passed += 1
        else:
            print(f"[FAIL] Solving check failed: {result}")
            checks_failed += 1
    except Exception as e:
        print(f"[FAIL] Solving check failed: {e}")
        checks_failed += 1

    try:
        import numpy

        print(f"[OK] NumPy {numpy.__version__} available")
        checks_passed += 1
    except ImportError:
        print("[FAIL] NumPy not available")
        checks_failed += 1

    try:
        import matplotlib

        print(f"[OK] Matplotlib {matplotlib.__version__} available")
        checks_passed += 1
    except ImportError:
        print("[WARN] Matplotlib not available (image plots disabled, ASCII plots still work)")
        print("  To install: pip install matplotlib")

    print("-" * 50)
    print(f"Results: {checks_passed} passed, {checks_failed} failed")

    if checks_failed > 0:
        print("\n[WARN] Some health checks failed. Core functionality may be impaired.")
        return 1

    print("\n[OK] All health checks passed!")
    return 0


def _emit(data: dict[str, Any]) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def _error(message: str, code: str, output_format: str) -> int:
    if output_format == "json":
        _emit({"ok": False, "error": message, "error_code": code})
    else:
        print(f"Error: {message}")
    return 1


def print_entry(entry: HistoryEntry, output_format: str = "human", steps: bool = False) -> None:
    """Print one solved equation.

    Args:
        entry: Solved equation (fresh or from history)
        output_format: "json" for JSON output, "human" for human-readable
        steps: Include the step-by-step explanation
    """
    explanation = explain(entry.a, entry.b, entry.c, entry.result) if steps else None
    if output_format == "json":
        data: dict[str, Any] = {"ok": True, **entry.to_dict(), "equation": entry.equation}
        data["summary"] = format_roots(entry.result)
        if explanation is not None:
            data["explanation"] = explanation.to_dict()
        _emit(data)
        return

    print(entry.equation)
    print(f"Δ = {format_number(entry.result.delta)}")
    print(format_roots(entry.result))
    if explanation is not None:
        print(f"{explanation.status_icon} {explanation.status_text}")
        print()
        for line in explanation.steps:
            print(f"  {line}")
        print()
        vx, vy = explanation.vertex
        print(f"Vertex: ({format_number(vx)}, {format_number(vy)})")
        for paragraph in explanation.interpretation:
            print(paragraph)


def _cmd_solve(args: argparse.Namespace, ctx: AppContext) -> int:
    try:
        a, b, c = parse_coefficients(args.a, args.b, args.c)
        entry = ctx.solve(a, b, c, record=not args.no_history)
    except ValidationError as e:
        return _error(e.message, e.code, args.format)

    print_entry(entry, args.format, steps=args.steps)

    if args.ascii:
        print()
        print(ascii_plot(a, b, c, entry.result))
    if args.plot:
        try:
            path = plot_equation(
                a, b, c, entry.result, path=args.plot, theme=ctx.theme, open_viewer=args.open
            )
        except PlottingError as e:
            return _error(e.message, e.code, args.format)
        if args.format == "human":
            print(f"Plot saved to: {path}")
    return 0


def _cmd_history(args: argparse.Namespace, ctx: AppContext) -> int:
    action = args.action
    if action == "list":
        if args.format == "json":
            _emit({"ok": True, "entries": ctx.history.to_list()})
            return 0
        count = len(ctx.history)
        print(f"{count} equation{'s' if count != 1 else ''} solved")
        if count == 0:
            print("No equations solved yet")
        for entry in ctx.history:
            print(
                f"{entry.id[:8]}  {entry.equation:<24} "
                f"{format_roots(entry.result):<36} {time_ago(entry.created_at)}"
            )
        return 0

    if action == "clear":
        ctx.clear_history()
        if args.format == "json":
            _emit({"ok": True, "entries": []})
        else:
            print("History cleared")
        return 0

    if not args.id:
        return _error(f"history {action} requires an entry id", "MISSING_ID", args.format)
    entry = _find_by_prefix(ctx, args.id)
    if entry is None:
        return _error(f"No history entry with id {args.id!r}", "NOT_FOUND", args.format)
    if action == "rerun":
        try:
            entry = ctx.rerun(entry.id)
        except ValidationError as e:
            return _error(e.message, e.code, args.format)
    print_entry(entry, args.format, steps=args.steps)
    return 0


def _find_by_prefix(ctx: AppContext, entry_id: str) -> HistoryEntry | None:
    entry = ctx.history.find(entry_id)
    if entry is not None:
        return entry
    matches = [e for e in ctx.history if e.id.startswith(entry_id)]
    return matches[0] if len(matches) == 1 else None


def _cmd_theme(args: argparse.Namespace, ctx: AppContext) -> int:
    if args.action == "toggle":
        ctx.toggle_theme()
    elif args.action in ("light", "dark"):
        ctx.set_theme(args.action)
    if args.format == "json":
        _emit({"ok": True, "theme": ctx.theme})
    else:
        print(ctx.theme)
    return 0


def _cmd_voice(args: argparse.Namespace, ctx: AppContext) -> int:
    found = parse_transcript(args.transcript)
    if not found:
        return _error(
            'Voice command not recognized. Try: "a equals 2, b equals -3, c equals 1"',
            "NOT_RECOGNIZED",
            args.format,
        )
    missing = [name for name in ("a", "b", "c") if name not in found]
    if missing:
        if args.format == "json":
            _emit({"ok": True, "coefficients": found, "missing": missing})
        else:
            values = ", ".join(f"{k}={format_number(v)}" for k, v in found.items())
            print(f"Recognized {values}; missing {', '.join(missing)}")
        return 0
    try:
        entry = ctx.solve(found["a"], found["b"], found["c"])
    except ValidationError as e:
        return _error(e.message, e.code, args.format)
    if args.format == "human":
        print(f"Recognized {format_equation(entry.a, entry.b, entry.c)}")
    print_entry(entry, args.format)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quadratic", description="Solve ax² + bx + c = 0 and keep a history"
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    parser.add_argument("--store", type=str, help="Path of the JSON store file")
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Set logging level (default: QUADRATIC_LOG_LEVEL or WARNING)",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--health-check",
        action="store_true",
        help="Run health check and verify dependencies",
    )

    sub = parser.add_subparsers(dest="command")

    solve_p = sub.add_parser("solve", help="Solve an equation")
    # Plain negatives ("-3", "-0.5") parse as positionals; "-sqrt(2)" needs a preceding "--"
    solve_p.add_argument("a", type=str)
    solve_p.add_argument("b", type=str)
    solve_p.add_argument("c", type=str)
    solve_p.add_argument("--steps", action="store_true", help="Show step-by-step calculation")
    solve_p.add_argument("--ascii", action="store_true", help="Print an ASCII plot")
    solve_p.add_argument("--plot", type=str, metavar="PATH", help="Save a PNG plot")
    solve_p.add_argument(
        "--open", action="store_true", help="Open the saved plot in the default viewer"
    )
    solve_p.add_argument(
        "--no-history", action="store_true", help="Do not record this equation"
    )

    history_p = sub.add_parser("history", help="List, inspect or clear past equations")
    history_p.add_argument(
        "action", nargs="?", choices=["list", "show", "rerun", "clear"], default="list"
    )
    history_p.add_argument("id", nargs="?", help="Entry id (or unique prefix)")
    history_p.add_argument("--steps", action="store_true", help="Show step-by-step calculation")

    theme_p = sub.add_parser("theme", help="Show or change the theme preference")
    theme_p.add_argument(
        "action", nargs="?", choices=["show", "light", "dark", "toggle"], default="show"
    )

    voice_p = sub.add_parser("voice", help="Read coefficients from a spoken transcript")
    voice_p.add_argument("transcript", type=str)

    return parser


_COMMANDS = {
    "solve": _cmd_solve,
    "history": _cmd_history,
    "theme": _cmd_theme,
    "voice": _cmd_voice,
}


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, 1 for validation or lookup errors)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, log_file=args.log_file)

    if args.version:
        print(VERSION)
        return 0
    if args.health_check:
        return _health_check()
    if args.command is None:
        parser.print_help()
        return 0

    store = JsonFileStore(args.store) if args.store else JsonFileStore()
    ctx = AppContext.open(store)
    return _COMMANDS[args.command](args, ctx)


if __name__ == "__main__":
    sys.exit(main_entry())
