"""Token model: categories, precedence, and the sign-run merge rules.

Consecutive ``+``/``-`` characters are accumulated into one token whose
category carries the net sign. Whether such a run is unary or binary is left
to the evaluator, which defaults a missing left operand to zero.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .types import InvalidExpressionError

NO_PRECEDENCE = -1


class TokenCategory(Enum):
    """Token categories; operators carry their precedence."""

    NONE = ("none", NO_PRECEDENCE)
    INTEGER = ("integer", NO_PRECEDENCE)
    VARIABLE = ("variable", NO_PRECEDENCE)
    ADD = ("add", 1)
    SUBTRACT = ("subtract", 1)
    MULTIPLY = ("multiply", 2)
    DIVIDE = ("divide", 2)
    POWER = ("power", 3)
    GROUP_OPEN = ("group_open", NO_PRECEDENCE)
    GROUP_CLOSE = ("group_close", NO_PRECEDENCE)

    @property
    def precedence(self) -> int:
        return self.value[1]


OPERATOR_SYMBOLS = {
    "+": TokenCategory.ADD,
    "-": TokenCategory.SUBTRACT,
    "*": TokenCategory.MULTIPLY,
    "/": TokenCategory.DIVIDE,
    "^": TokenCategory.POWER,
    "(": TokenCategory.GROUP_OPEN,
    ")": TokenCategory.GROUP_CLOSE,
}

_OPERATORS = frozenset(
    {
        TokenCategory.ADD,
        TokenCategory.SUBTRACT,
        TokenCategory.MULTIPLY,
        TokenCategory.DIVIDE,
        TokenCategory.POWER,
    }
)


def is_value_or_variable(category: TokenCategory) -> bool:
    return category in (TokenCategory.INTEGER, TokenCategory.VARIABLE)


def is_operator(category: TokenCategory) -> bool:
    return category in _OPERATORS


def is_group(category: TokenCategory) -> bool:
    return category in (TokenCategory.GROUP_OPEN, TokenCategory.GROUP_CLOSE)


def classify(char: str) -> TokenCategory:
    """Map a single input character to its category (NONE if unsupported)."""
    if char.isascii() and char.isdigit():
        return TokenCategory.INTEGER
    if char.isascii() and char.isalpha():
        return TokenCategory.VARIABLE
    return OPERATOR_SYMBOLS.get(char, TokenCategory.NONE)


def cannot_merge(pending: TokenCategory, incoming: TokenCategory) -> bool:
    """Return True if ``incoming`` must start a new token after ``pending``.

    Group delimiters never merge. Sign characters always join a run of sign
    characters. Anything else merges only with its own category.
    """
    if is_group(pending) or is_group(incoming):
        return True
    if (
        pending.precedence == TokenCategory.ADD.precedence
        and incoming.precedence == TokenCategory.ADD.precedence
    ):
        return False
    return pending is not incoming


def merge(pending: TokenCategory, incoming: TokenCategory) -> TokenCategory:
    """Return the category of ``pending`` after absorbing ``incoming``.

    Raises:
        InvalidExpressionError: for repeated non-sign operators such as ``**``
    """
    if pending is TokenCategory.SUBTRACT and incoming is TokenCategory.SUBTRACT:
        return TokenCategory.ADD
    if TokenCategory.SUBTRACT in (pending, incoming):
        return TokenCategory.SUBTRACT
    if pending is TokenCategory.ADD or is_value_or_variable(pending):
        return pending
    raise InvalidExpressionError()


@dataclass
class Token:
    """A lexeme and its category."""

    text: str
    category: TokenCategory

    @property
    def precedence(self) -> int:
        return self.category.precedence

    def is_value_or_variable(self) -> bool:
        return is_value_or_variable(self.category)

    def is_operator(self) -> bool:
        return is_operator(self.category)

    def is_group(self) -> bool:
        return is_group(self.category)

    def __repr__(self) -> str:
        return f"Token({self.text!r}, {self.category.name})"
