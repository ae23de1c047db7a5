"""Type definitions: calculator errors and the result dataclass for API responses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class EvalResult:
    """Result of evaluating one input line."""

    ok: bool
    result: str | None = None
    error: str | None = None
    error_code: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.result is not None:
            result_dict["result"] = self.result
        if self.error is not None:
            result_dict["error"] = self.error
        if self.error_code is not None:
            result_dict["error_code"] = self.error_code
        return result_dict

    def __repr__(self) -> str:
        if not self.ok:
            return f"EvalResult(ok=False, error={self.error!r}, error_code={self.error_code!r})"
        return f"EvalResult(ok={self.ok}, result={self.result!r})"


class CalculatorError(Exception):
    """Base class for faults that abort evaluation of a single line."""

    default_message = "Calculator error"
    default_code = "CALCULATOR_ERROR"

    def __init__(self, message: str | None = None, code: str | None = None):
        self.message = message or self.default_message
        self.code = code or self.default_code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class UnknownVariableError(CalculatorError):
    """Raised when a referenced identifier has no value."""

    default_message = "Unknown variable"
    default_code = "UNKNOWN_VARIABLE"


class InvalidIdentifierError(CalculatorError):
    """Raised when an assignment target is not a valid variable name."""

    default_message = "Invalid identifier"
    default_code = "INVALID_IDENTIFIER"


class InvalidExpressionError(CalculatorError):
    """Raised for malformed expressions and failed arithmetic."""

    default_message = "Invalid expression"
    default_code = "INVALID_EXPRESSION"


class UnknownCommandError(CalculatorError):
    """Raised for a slash command other than /help or /exit."""

    default_message = "Unknown command"
    default_code = "UNKNOWN_COMMAND"
