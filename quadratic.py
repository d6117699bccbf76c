#!/usr/bin/env python3
"""
Quadratic Solver

Main entry point for the quadratic equation solver. This file is a thin
wrapper that delegates all functionality to the quadratic_pkg package.

Usage:
    python quadratic.py solve 1 -3 2 --steps   # Solve and explain
    python quadratic.py history                # List past equations
    python quadratic.py --help                 # Show help
"""

from __future__ import annotations

import sys


def main() -> int:
    """
    Main entry point.

    Delegates to quadratic_pkg.cli, which handles argument parsing,
    solving, history and output formatting.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    try:
        from quadratic_pkg.cli import main_entry

        return main_entry(sys.argv[1:])
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        return 1
    except ImportError as e:
        print(f"Error: Failed to import quadratic_pkg: {e}")
        print("Please ensure all dependencies are installed: pip install -e .")
        return 1


if __name__ == "__main__":
    sys.exit(main())
