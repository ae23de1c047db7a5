"""Postfix evaluation over arbitrary-precision integers.

Operands stay as token text on the stack until an operator consumes them,
so a variable is only looked up when it takes part in an operation or is the
final result. Intermediate results are kept as SymPy integers.
"""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Iterator, Union

import sympy as sp

from . import config
from .logging_config import get_logger
from .tokens import Token, TokenCategory
from .types import InvalidExpressionError, UnknownVariableError

logger = get_logger("evaluator")

Operand = Union[str, sp.Integer]


class VariableEnvironment:
    """Mapping of variable names to integer values.

    Names are stored exactly as assigned, so ``a`` and ``A`` are distinct.
    Entries are only ever added or overwritten.
    """

    def __init__(self) -> None:
        self._values: dict[str, sp.Integer] = {}

    def get(self, name: str) -> sp.Integer | None:
        return self._values.get(name)

    def set(self, name: str, value: sp.Integer) -> None:
        self._values[name] = value

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)


@contextmanager
def unlimited_int_digits() -> Iterator[None]:
    """Lift the interpreter's int <-> str digit limit for the duration of the block."""
    # Only present on interpreters that enforce a limit (3.11+ and backports)
    if not hasattr(sys, "set_int_max_str_digits"):
        yield
        return
    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(0)
    try:
        yield
    finally:
        sys.set_int_max_str_digits(previous)


def parse_integer(text: str) -> sp.Integer:
    """Parse a signed decimal literal into an arbitrary-precision integer."""
    with unlimited_int_digits():
        return sp.Integer(int(text))


def format_integer(value: sp.Integer) -> str:
    """Render an integer in decimal, whatever its length."""
    with unlimited_int_digits():
        return str(int(value))


def resolve_value_or_variable(operand: Operand, env: VariableEnvironment) -> sp.Integer:
    """Turn a stack operand into an integer.

    Text matching the variable grammar is looked up verbatim, including any
    leading sign. Text matching the integer grammar is parsed.

    Raises:
        UnknownVariableError: if a variable has no value
        InvalidExpressionError: if the text is neither a variable nor an integer
    """
    if isinstance(operand, sp.Integer):
        return operand
    if config.VAR_NAME_RE.fullmatch(operand):
        value = env.get(operand)
        if value is None:
            raise UnknownVariableError()
        return value
    if config.INT_VALUE_RE.fullmatch(operand):
        return parse_integer(operand)
    raise InvalidExpressionError()


def truncating_divide(dividend: sp.Integer, divisor: sp.Integer) -> sp.Integer:
    """Integer division rounding toward zero."""
    if divisor.is_zero:
        raise InvalidExpressionError()
    quotient = abs(dividend) // abs(divisor)
    if dividend.is_negative != divisor.is_negative:
        quotient = -quotient
    return sp.Integer(quotient)


def power(base: sp.Integer, exponent: sp.Integer) -> sp.Integer:
    """Raise ``base`` to a non-negative exponent.

    The exponent may not exceed MAX_EXPONENT, and the result may not need
    more than MAX_RESULT_BITS bits (estimated as exponent * bits of base).
    """
    if exponent.is_negative or int(exponent) > config.MAX_EXPONENT:
        logger.debug("Exponent outside 0..%d", config.MAX_EXPONENT)
        raise InvalidExpressionError()
    estimated_bits = int(exponent) * int(base).bit_length()
    if estimated_bits > config.MAX_RESULT_BITS:
        logger.debug(
            "Power result of ~%d bits exceeds %d", estimated_bits, config.MAX_RESULT_BITS
        )
        raise InvalidExpressionError()
    return sp.Integer(base**exponent)


def _pop(stack: list[Operand], env: VariableEnvironment) -> sp.Integer:
    if not stack:
        raise InvalidExpressionError()
    return resolve_value_or_variable(stack.pop(), env)


def _pop_or_zero(stack: list[Operand], env: VariableEnvironment) -> sp.Integer:
    if not stack:
        return sp.Integer(0)
    return resolve_value_or_variable(stack.pop(), env)


def evaluate_postfix(postfix: list[Token], env: VariableEnvironment) -> sp.Integer | None:
    """Evaluate a postfix token sequence.

    ``+`` and ``-`` accept a single operand, treating the missing left side
    as zero. The other operators require two.

    Args:
        postfix: Tokens in postfix order
        env: Variable values used for lookups

    Returns:
        The resulting integer, or None for an empty sequence
    """
    stack: list[Operand] = []
    for token in postfix:
        if token.is_value_or_variable():
            stack.append(token.text)
            continue
        if not token.is_operator():
            continue

        a = _pop(stack, env)
        if token.category is TokenCategory.ADD:
            b = _pop_or_zero(stack, env)
            stack.append(a + b)
        elif token.category is TokenCategory.SUBTRACT:
            b = _pop_or_zero(stack, env)
            stack.append(b - a)
        elif token.category is TokenCategory.MULTIPLY:
            b = _pop(stack, env)
            stack.append(a * b)
        elif token.category is TokenCategory.DIVIDE:
            b = _pop(stack, env)
            stack.append(truncating_divide(b, a))
        elif token.category is TokenCategory.POWER:
            b = _pop(stack, env)
            stack.append(power(b, a))

    if not stack:
        return None
    if len(stack) > 1:
        logger.debug("Ignoring %d leftover operand(s)", len(stack) - 1)
    return resolve_value_or_variable(stack.pop(), env)
