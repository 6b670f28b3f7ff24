"""Token kinds and the token record produced by the lexer."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class TokenType(enum.Enum):
    """Kinds of lexical token on a command line."""

    WORD = enum.auto()
    PIPE = enum.auto()
    REDIRECT_IN = enum.auto()
    REDIRECT_OUT = enum.auto()
    APPEND = enum.auto()
    HEREDOC = enum.auto()
    AND = enum.auto()
    OR = enum.auto()
    PARENTHESES_OPEN = enum.auto()
    PARENTHESES_CLOSE = enum.auto()
    QUOTED_STRING = enum.auto()
    DOUBLE_QUOTED_STRING = enum.auto()
    FAKE_QUOTED_STRING = enum.auto()
    FAKE_DOUBLE_QUOTED_STRING = enum.auto()

    def is_redirection(self) -> bool:
        """True for ``<``, ``>``, ``>>`` and ``<<``."""
        return self in _REDIRECTIONS


_REDIRECTIONS = frozenset(
    {
        TokenType.REDIRECT_IN,
        TokenType.REDIRECT_OUT,
        TokenType.APPEND,
        TokenType.HEREDOC,
    }
)


@dataclass(frozen=True)
class Token:
    """One lexical token: its kind and, where it has one, its text."""

    type: TokenType
    value: str | None = None