"""Lexer: turns an expression string into tokens, collapsing sign runs."""

from __future__ import annotations

from .logging_config import get_logger
from .tokens import Token, TokenCategory, cannot_merge, classify, merge

logger = get_logger("lexer")


def tokenize(expression: str) -> list[Token]:
    """Split an expression into tokens.

    Whitespace and unsupported characters are dropped without ending the
    token being built, so ``"1 2"`` lexes as the single integer ``12`` and
    ``"- -"`` as one sign run.

    Args:
        expression: Raw expression text (e.g., "5 - - 3")

    Returns:
        List of tokens with non-empty text, empty for blank input

    Raises:
        InvalidExpressionError: if a run of ``*``, ``/`` or ``^`` is found
    """
    tokens: list[Token] = []
    if not expression or expression.isspace():
        return tokens

    current = Token("", TokenCategory.NONE)
    for char in expression:
        category = classify(char)
        if category is TokenCategory.NONE:
            continue
        if cannot_merge(current.category, category):
            if current.text:
                tokens.append(current)
            current = Token(char, category)
        else:
            current.text += char
            current.category = merge(current.category, category)
    if current.text:
        tokens.append(current)

    logger.debug("Tokens for %r: %s", expression, tokens)
    return tokens
