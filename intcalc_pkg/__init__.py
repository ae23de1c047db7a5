"""Integer calculator package: lexer, postfix converter, evaluator, and CLI."""

__all__ = [
    "config",
    "tokens",
    "lexer",
    "parser",
    "evaluator",
    "calculator",
    "cli",
    "types",
    "api",
    "logging_config",
]

# Public API exports

__api_exports__ = [
    "evaluate",
]
