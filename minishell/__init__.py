"""Lexer, validator and syntax-tree builder for a small shell, with C-style string, printf and line-reading helpers."""

__version__ = "0.1.0"

__all__ = [
    "cstring",
    "lexer",
    "linereader",
    "printf",
    "status",
    "syntax_tree",
    "tokens",
    "validate",
]