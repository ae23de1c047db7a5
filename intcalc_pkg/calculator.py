"""Line-level calculator: assignments, expression evaluation and commands.

Each ``Calculator`` owns its own ``VariableEnvironment``; nothing here is
module-global, so independent calculators never see each other's variables.
"""

from __future__ import annotations

import sympy as sp

from . import config
from .evaluator import (
    VariableEnvironment,
    evaluate_postfix,
    format_integer,
    resolve_value_or_variable,
)
from .lexer import tokenize
from .logging_config import get_logger
from .parser import to_postfix
from .types import (
    CalculatorError,
    InvalidExpressionError,
    InvalidIdentifierError,
    UnknownCommandError,
)

logger = get_logger("calculator")


class Calculator:
    """Evaluates input lines against a private variable environment."""

    def __init__(self, environment: VariableEnvironment | None = None) -> None:
        self.environment = environment if environment is not None else VariableEnvironment()

    def assign(self, variable: str, value_or_variable: str) -> None:
        """Store the value of a literal or existing variable under ``variable``.

        The right-hand side is a single operand, not an expression.

        Raises:
            InvalidIdentifierError: if ``variable`` is not letters (with optional sign)
            UnknownVariableError: if the right-hand side names an unset variable
            InvalidExpressionError: if the right-hand side is not a single operand
        """
        if not config.VAR_NAME_RE.fullmatch(variable):
            raise InvalidIdentifierError()
        value = resolve_value_or_variable(value_or_variable, self.environment)
        self.environment.set(variable, value)
        logger.debug("Assigned %s (%d bits)", variable, int(value).bit_length())

    def calculate(self, expression: str) -> sp.Integer | None:
        """Evaluate an expression or perform an assignment.

        Returns:
            The integer result, or None for blank input and assignments

        Raises:
            CalculatorError: on any fault in the line
        """
        if not expression or expression.isspace():
            return None
        if len(expression) > config.MAX_INPUT_LENGTH:
            logger.debug("Input of %d characters exceeds limit", len(expression))
            raise InvalidExpressionError()

        match = config.ASSIGN_RE.match(expression)
        if match:
            self.assign(match.group("lhs").strip(), match.group("rhs").strip())
            return None

        postfix = to_postfix(tokenize(expression))
        return evaluate_postfix(postfix, self.environment)

    def evaluate_line(self, line: str) -> str:
        """Evaluate one line and return the text to show.

        Returns the decimal result, an empty string when there is nothing to
        show, or the error message of the fault that aborted the line.
        """
        try:
            result = self.calculate(line.strip())
            return "" if result is None else format_integer(result)
        except CalculatorError as e:
            logger.debug(
                "Line %r failed: %s", line, e.message, extra={"error_code": e.code}
            )
            return str(e)

    def process_command(self, line: str) -> str:
        """Dispatch ``/help`` and ``/exit``; evaluate anything else.

        Any other input starting with ``/`` yields ``Unknown command``.
        """
        command = line.strip()
        if command == config.HELP_CMD:
            return config.HELP_TEXT
        if command == config.EXIT_CMD:
            return ""
        if command.startswith(config.COMMAND_PREFIX):
            return str(UnknownCommandError())
        return self.evaluate_line(command)
