import pytest

from minishell.lexer import tokenize
from minishell.status import ShellError
from minishell.syntax_tree import Node, build_tree, hoist_redirections, parse
from minishell.tokens import Token, TokenType

W = TokenType.WORD


def test_empty_input_gives_no_tree():
    assert parse([]) is None
    assert build_tree(tokenize("")) is None


def test_simple_command():
    assert parse(tokenize("ls -l")) == Node(W, args=["ls", "-l"])


def test_pipe():
    assert parse(tokenize("ls | wc -l")) == Node(
        TokenType.PIPE,
        left=Node(W, args=["ls"]),
        right=Node(W, args=["wc", "-l"]),
    )


def test_suffix_redirections_chain_on_right():
    tree = parse(tokenize("cat < in > out"))
    assert tree == Node(
        W,
        args=["cat"],
        left=Node(
            TokenType.REDIRECT_IN,
            file="in",
            right=Node(TokenType.REDIRECT_OUT, file="out"),
        ),
    )


def test_prefix_redirection():
    tree = parse(tokenize("< in cat"))
    assert tree == Node(
        W, args=["cat"], left=Node(TokenType.REDIRECT_IN, file="in")
    )


def test_quoted_tokens_are_skipped_by_parser():
    assert parse(tokenize("echo 'hi'")) == Node(W, args=["echo"])


def test_missing_redirection_file_raises():
    with pytest.raises(ShellError):
        parse([Token(TokenType.REDIRECT_IN, "<")])


def test_build_tree_hoists_multiple_redirections():
    tree = build_tree(tokenize("cat < in > out"))
    assert tree == Node(
        TokenType.REDIRECT_IN,
        file="in",
        left=Node(
            TokenType.REDIRECT_OUT,
            file="out",
            left=Node(W, args=["cat"]),
        ),
    )


def test_build_tree_single_append():
    tree = build_tree(tokenize("echo hi >> log"))
    assert tree == Node(
        TokenType.APPEND, file="log", left=Node(W, args=["echo", "hi"])
    )


def test_build_tree_heredoc_prefix():
    tree = build_tree(tokenize("<< EOF cat"))
    assert tree == Node(TokenType.HEREDOC, file="EOF", left=Node(W, args=["cat"]))


def test_build_tree_pipe_with_redirections():
    tree = build_tree(tokenize("cat < a | wc > b"))
    assert tree == Node(
        TokenType.PIPE,
        left=Node(TokenType.REDIRECT_IN, file="a", left=Node(W, args=["cat"])),
        right=Node(TokenType.REDIRECT_OUT, file="b", left=Node(W, args=["wc"])),
    )


def test_hoist_leaves_plain_command_alone():
    node = Node(W, args=["ls"])
    assert hoist_redirections(node) == Node(W, args=["ls"])


def test_hoist_none():
    assert hoist_redirections(None) is None


def _leftmost(node):
    while node.left is not None:
        node = node.left
    return node


def test_hoisted_command_is_leftmost_leaf_without_right_links():
    tree = build_tree(tokenize("grep x < a > b >> c"))
    leaf = _leftmost(tree)
    assert leaf.args == ["grep", "x"]
    node = tree
    files = []
    while node.type is not W:
        assert node.right is None
        files.append(node.file)
        node = node.left
    assert files == ["a", "b", "c"]