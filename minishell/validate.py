"""Check that a token sequence forms a syntactically valid command line."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import chain

from .status import ShellError
from .tokens import Token, TokenType

SYNTAX_ERROR_STATUS = 258


class TokenSyntaxError(ShellError):
    """Raised when tokens are in an order the shell cannot run."""

    def __init__(self, message: str) -> None:
        super().__init__(message, SYNTAX_ERROR_STATUS)


def _check_pipe(prev: Token | None, nxt: Token | None) -> None:
    if prev is None:
        raise TokenSyntaxError("Syntax error: unexpected pipe at the beginning")
    if nxt is None:
        raise TokenSyntaxError("Syntax error: invalid pipe sequence")
    if nxt.type is not TokenType.WORD:
        raise TokenSyntaxError("Syntax error: missing command after pipe")


def _check_logic_operator(prev: Token | None, nxt: Token | None) -> None:
    if prev is None:
        raise TokenSyntaxError(
            "Syntax error: unexpected operator at the beginning"
        )
    if nxt is None or nxt.type in (TokenType.AND, TokenType.OR):
        raise TokenSyntaxError("Syntax error: invalid operator sequence")
    if nxt.type is not TokenType.WORD:
        raise TokenSyntaxError("Syntax error: missing command after operator")


def _check_redirection(nxt: Token | None) -> None:
    if nxt is None or nxt.type is not TokenType.WORD:
        raise TokenSyntaxError("Syntax error: missing target for redirection")


def validate_tokens(tokens: Iterable[Token]) -> list[Token]:
    """Return the tokens as a list if valid; raise :class:`TokenSyntaxError` if not."""
    items = list(tokens)
    depth = 0
    previous = chain([None], items)
    following = chain(items[1:], [None])
    for prev, token, nxt in zip(previous, items, following):
        if token.type is TokenType.PIPE:
            _check_pipe(prev, nxt)
        elif token.type.is_redirection():
            _check_redirection(nxt)
        elif token.type in (TokenType.AND, TokenType.OR):
            _check_logic_operator(prev, nxt)
        if token.type is TokenType.PARENTHESES_OPEN:
            depth += 1
        elif token.type is TokenType.PARENTHESES_CLOSE:
            depth -= 1
    if depth != 0:
        raise TokenSyntaxError("Syntax error: unbalanced parentheses")
    return items