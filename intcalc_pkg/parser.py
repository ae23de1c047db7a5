"""Infix to postfix conversion (shunting-yard).

Operators of equal precedence are popped before the incoming one is pushed,
so every operator is left-associative: ``2^3^2`` converts to ``2 3 ^ 2 ^``.
"""

from __future__ import annotations

from .logging_config import get_logger
from .tokens import Token, TokenCategory
from .types import InvalidExpressionError

logger = get_logger("parser")


def to_postfix(tokens: list[Token]) -> list[Token]:
    """Reorder infix tokens into postfix (Reverse Polish) order.

    Args:
        tokens: Tokens produced by ``lexer.tokenize``

    Returns:
        The same tokens in postfix order, group delimiters removed

    Raises:
        InvalidExpressionError: if parentheses are unbalanced
    """
    postfix: list[Token] = []
    stack: list[Token] = []

    for token in tokens:
        if token.is_value_or_variable():
            postfix.append(token)
        elif token.category is TokenCategory.GROUP_OPEN:
            stack.append(token)
        elif token.category is TokenCategory.GROUP_CLOSE:
            while stack and stack[-1].category is not TokenCategory.GROUP_OPEN:
                postfix.append(stack.pop())
            if not stack:
                raise InvalidExpressionError()
            stack.pop()
        elif token.is_operator():
            while stack and stack[-1].precedence >= token.precedence:
                postfix.append(stack.pop())
            stack.append(token)

    while stack:
        token = stack.pop()
        if token.is_group():
            raise InvalidExpressionError()
        postfix.append(token)

    logger.debug("Postfix: %s", postfix)
    return postfix
