"""Split a command line into tokens."""

from __future__ import annotations

from collections.abc import Iterator

from .status import ShellError
from .tokens import Token, TokenType

_SPECIAL = frozenset("|<>'\"()&")
_WHITE_SPACE = frozenset(" \t\r\f\v")


class LexError(ShellError):
    """Raised when a command line cannot be tokenised."""


def is_special_char(c: str) -> bool:
    """True for characters that start an operator or a quoted string."""
    return c in _SPECIAL


def is_white_space(c: str) -> bool:
    """True for the blanks that separate words (newline is not one)."""
    return c in _WHITE_SPACE


def tokenize(line: str) -> list[Token]:
    """Return the tokens of ``line``; raise :class:`LexError` on bad input."""
    return list(_Scanner(line))


class _Scanner:
    def __init__(self, line: str) -> None:
        self.line = line
        self.pos = 0

    def _peek(self, offset: int = 0) -> str:
        index = self.pos + offset
        return self.line[index] if index < len(self.line) else ""

    def _follows_space(self, index: int) -> bool:
        """Whether ``index`` starts the line or directly follows a space."""
        return index == 0 or self.line[index - 1] == " "

    def __iter__(self) -> Iterator[Token]:
        while self.pos < len(self.line):
            c = self._peek()
            if is_white_space(c):
                self.pos += 1
            elif c in "'\"":
                yield self._quoted()
            elif c in "()":
                self.pos += 1
                yield Token(
                    TokenType.PARENTHESES_OPEN
                    if c == "("
                    else TokenType.PARENTHESES_CLOSE
                )
            elif c in "<>":
                yield self._redirect()
            elif c == "|":
                yield self._pipe()
            elif c == "&":
                yield self._ampersand()
            else:
                yield self._word()

    def _word(self) -> Token:
        start = self.pos
        while self.pos < len(self.line):
            c = self.line[self.pos]
            if is_white_space(c) or is_special_char(c):
                break
            self.pos += 1
        word = self.line[start:self.pos]
        if self._follows_space(start):
            return Token(TokenType.WORD, word)
        return Token(TokenType.FAKE_QUOTED_STRING, word)

    def _quoted(self) -> Token:
        quote_at = self.pos
        quote = self.line[quote_at]
        end = self.line.find(quote, quote_at + 1)
        if end < 0:
            self.pos = len(self.line)
            raise LexError("Error: unmatched quote", 258)
        text = self.line[quote_at + 1:end]
        self.pos = end + 1
        if self._follows_space(quote_at):
            kind = (
                TokenType.QUOTED_STRING
                if quote == "'"
                else TokenType.DOUBLE_QUOTED_STRING
            )
        else:
            kind = (
                TokenType.FAKE_QUOTED_STRING
                if quote == "'"
                else TokenType.FAKE_DOUBLE_QUOTED_STRING
            )
        return Token(kind, text)

    def _redirect(self) -> Token:
        c = self._peek()
        if self._peek(1) == c:
            self.pos += 2
            kind = TokenType.HEREDOC if c == "<" else TokenType.APPEND
            return Token(kind, c * 2)
        self.pos += 1
        kind = TokenType.REDIRECT_IN if c == "<" else TokenType.REDIRECT_OUT
        return Token(kind, c)

    def _pipe(self) -> Token:
        self.pos += 1
        if self._peek() == "|":
            self.pos += 1
            return Token(TokenType.OR)
        return Token(TokenType.PIPE, "|")

    def _ampersand(self) -> Token:
        self.pos += 1
        if self._peek() == "&":
            self.pos += 1
            return Token(TokenType.AND)
        raise LexError("Syntax error: unexpected error near &", 2)