"""Build the abstract syntax tree of pipes, commands and redirections."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from .status import ShellError
from .tokens import Token, TokenType


@dataclass
class Node:
    """A tree node: a command (WORD), a PIPE, or a redirection with its file."""

    type: TokenType
    args: list[str] = field(default_factory=list)
    file: str | None = None
    left: Node | None = None
    right: Node | None = None


def _redirection_node(token: Token, tokens: Iterator[Token]) -> Node:
    target = next(tokens, None)
    if target is None or target.type is not TokenType.WORD:
        raise ShellError("Missing file for redirection", 1)
    return Node(token.type, file=target.value)


def _append_redirection(command: Node, redir: Node) -> None:
    if command.left is None:
        command.left = redir
        return
    last = command.left
    while last.right is not None:
        last = last.right
    last.right = redir


def _parse(tokens: Iterator[Token]) -> Node | None:
    left_node: Node | None = None
    command: Node | None = None
    is_prefix = True
    for token in tokens:
        kind = token.type
        if kind is TokenType.PIPE:
            return Node(TokenType.PIPE, left=left_node, right=_parse(tokens))
        if kind.is_redirection():
            redir = _redirection_node(token, tokens)
            if command is None:
                command = Node(TokenType.WORD)
                left_node = command
            if is_prefix:
                redir.right = command.left
                command.left = redir
                is_prefix = False
            else:
                _append_redirection(command, redir)
        elif kind is TokenType.WORD:
            if command is None:
                command = Node(TokenType.WORD)
                left_node = command
            if token.value is not None:
                command.args.append(token.value)
            is_prefix = False
    return left_node


def parse(tokens: Iterable[Token]) -> Node | None:
    """Parse tokens into a tree; commands keep their redirections in ``left``.

    Tokens other than words, pipes and redirections are skipped.
    Returns ``None`` when there is nothing to run.
    """
    return _parse(iter(tokens))


def hoist_redirections(node: Node | None) -> Node | None:
    """Move each command below its redirections; return the new subtree root.

    A command whose redirections hang off it as ``r1 -> r2 -> ...`` becomes
    ``r1`` with ``r1.left = r2``, ..., and the command as the last ``left``.
    """
    if node is None:
        return None
    first = node.left
    if (
        node.type is TokenType.WORD
        and first is not None
        and first.type.is_redirection()
    ):
        current = first
        following = first.right
        while following is not None and following.type.is_redirection():
            current.left, current.right = current.right, None
            current = following
            following = current.right
        node.left = current.left
        current.left = node
        node = first
    node.left = hoist_redirections(node.left)
    node.right = hoist_redirections(node.right)
    return node


def build_tree(tokens: Iterable[Token]) -> Node | None:
    """Parse tokens and hoist redirections above their commands."""
    root = parse(tokens)
    if root is None:
        return None
    return hoist_redirections(root)