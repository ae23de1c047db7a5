"""Public API - returns structured objects instead of display text."""

from __future__ import annotations

from .calculator import Calculator
from .evaluator import format_integer
from .logging_config import get_logger
from .types import CalculatorError, EvalResult

logger = get_logger("api")


def evaluate(expression: str, calculator: Calculator | None = None) -> EvalResult:
    """Evaluate one line (expression or assignment).

    Args:
        expression: Input line (e.g., "2 + 2", "a = 10")
        calculator: Calculator whose variables are used and updated; a fresh
            one is used when omitted

    Returns:
        EvalResult with the decimal result (None for assignments and blank
        input) or the error message and code

    Example:
        >>> from intcalc_pkg.api import evaluate
        >>> evaluate("2^3^2").result
        '64'
        >>> evaluate("x + 1").error
        'Unknown variable'
    """
    calc = calculator if calculator is not None else Calculator()
    try:
        value = calc.calculate(expression.strip())
        return EvalResult(
            ok=True, result=None if value is None else format_integer(value)
        )
    except CalculatorError as e:
        logger.debug(
            "Evaluation of %r failed: %s", expression, e.message, extra={"error_code": e.code}
        )
        return EvalResult(ok=False, error=e.message, error_code=e.code)
