from __future__ import annotations

import argparse
import json
import sys

from . import config
from .api import evaluate
from .calculator import Calculator
from .config import EXIT_CMD, FAREWELL_TEXT, HELP_CMD, VERSION
from .logging_config import get_logger, setup_logging

logger = get_logger("cli")


def _non_negative_int(value: str) -> int:
    """argparse type for counts that may be zero but not negative."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def _health_check() -> int:
    """Run health check to verify dependencies and basic operations.

    Returns:
        Exit code (0 for success, non-zero for failures)
    """
    checks_passed = 0
    checks_failed = 0

    print("Running intcalc health check...")
    print("-" * 50)

    try:
        import sympy as sp

        print(f"[OK] SymPy {sp.__version__} imported successfully")
        checks_passed += 1
    except ImportError as e:
        print(f"[FAIL] SymPy import failed: {e}")
        checks_failed += 1

    checks = [
        ("Basic arithmetic", "2 + 2 * 2", "6"),
        ("Sign-run collapsing", "5 + - + - 3", "8"),
        ("Left-associative power", "2^3^2", "64"),
        ("Unbalanced parentheses", "(2 + 3", "Invalid expression"),
    ]
    calc = Calculator()
    for label, expression, expected in checks:
        try:
            actual = calc.evaluate_line(expression)
        except Exception as e:
            print(f"[FAIL] {label} check failed: {e}")
            checks_failed += 1
            continue
        if actual == expected:
            print(f"[OK] {label} works")
            checks_passed += 1
        else:
            print(f"[FAIL] {label}: expected {expected!r}, got {actual!r}")
            checks_failed += 1

    print("-" * 50)
    print(f"Results: {checks_passed} passed, {checks_failed} failed")

    if checks_failed > 0:
        print("\n[WARN] Some health checks failed. Core functionality may be impaired.")
        return 1

    print("\n[OK] All health checks passed!")
    return 0


def print_result_pretty(res: dict, output_format: str = "human") -> None:
    """Print an evaluation result.

    Args:
        res: Result dictionary from ``EvalResult.to_dict``
        output_format: "json" for JSON output, "human" for human-readable
    """
    if output_format == "json":
        print(json.dumps(res, indent=2, ensure_ascii=False))
        return
    if not res.get("ok"):
        print(res.get("error"))
        return
    if res.get("result") is not None:
        print(res["result"])


def repl_loop(output_format: str = "human") -> None:
    """Read lines until /exit or end of input, printing each result."""
    try:
        import readline  # noqa: F401
    except ImportError:
        # readline not available on Windows - that's fine
        pass

    calc = Calculator()
    while True:
        try:
            raw = input()
        except (EOFError, KeyboardInterrupt):
            break
        if raw.strip() == EXIT_CMD:
            break

        if output_format == "json" and not raw.strip().startswith(config.COMMAND_PREFIX):
            print_result_pretty(evaluate(raw, calc).to_dict(), output_format)
            continue
        text = calc.process_command(raw)
        if text.strip():
            print(text)

    print(FAREWELL_TEXT)


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for the intcalc CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = argparse.ArgumentParser(prog="intcalc")
    parser.add_argument(
        "-e",
        "--eval",
        type=str,
        help="Evaluate one expression and exit (non-interactive)",
        dest="eval_expr",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    parser.add_argument(
        "--max-exponent",
        type=_non_negative_int,
        help=f"Largest accepted exponent for ^ (default: {config.MAX_EXPONENT})",
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Set logging level (default: {config.LOG_LEVEL})",
    )
    parser.add_argument(
        "--log-file", type=str, help="Write logs to file (default: $INTCALC_LOG_FILE)"
    )
    parser.add_argument(
        "--health-check",
        action="store_true",
        help="Run health check and verify dependencies",
    )
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, log_file=args.log_file)

    # Apply CLI configuration overrides
    if args.max_exponent is not None:
        config.MAX_EXPONENT = args.max_exponent

    if args.version:
        print(VERSION)
        return 0
    if args.health_check:
        return _health_check()
    if args.eval_expr is not None:
        expr = args.eval_expr.strip()
        if expr.startswith(config.COMMAND_PREFIX):
            text = Calculator().process_command(expr)
            if text:
                print(text)
            return 0 if expr in (HELP_CMD, EXIT_CMD) else 1
        res = evaluate(expr).to_dict()
        print_result_pretty(res, output_format=args.format)
        return 0 if res.get("ok") else 1

    logger.debug("Starting REPL (format=%s)", args.format)
    repl_loop(output_format=args.format)
    return 0


if __name__ == "__main__":
    sys.exit(main_entry())
