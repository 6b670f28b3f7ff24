# minishell

The front end of a small shell: it turns a command line into tokens,
checks that the token sequence makes sense, and builds a syntax tree of
commands, pipes and redirections. It also provides helpers that follow
C library rules: integer and string conversion, splitting, trimming,
comparison, a minimal `printf` and a buffered line reader.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Tokenizing

```python
from minishell.lexer import tokenize

tokens = tokenize("< input.txt grep foo | wc -l > out.txt")
```

`tokenize` returns a list of `minishell.tokens.Token` records, each with a
`type` (a `TokenType`) and, where it has one, a `value`. The token types
are `WORD`, `PIPE`, `REDIRECT_IN`, `REDIRECT_OUT`, `APPEND`, `HEREDOC`,
`AND`, `OR`, `PARENTHESES_OPEN`, `PARENTHESES_CLOSE`, `QUOTED_STRING`,
`DOUBLE_QUOTED_STRING`, `FAKE_QUOTED_STRING` and
`FAKE_DOUBLE_QUOTED_STRING`. `TokenType.is_redirection()` is true for
`<`, `>`, `>>` and `<<`.

A word or quoted string that starts the line or follows a space is a
`WORD`, `QUOTED_STRING` or `DOUBLE_QUOTED_STRING`; one glued to the text
before it is marked `FAKE_QUOTED_STRING` or `FAKE_DOUBLE_QUOTED_STRING`.

`tokenize` raises `minishell.lexer.LexError` for an unmatched quote
(status 258) or a lone `&` (status 2). `is_special_char` and
`is_white_space` tell which characters the lexer treats as operators and
as blanks.

## Validating

```python
from minishell.validate import validate_tokens

validate_tokens(tokens)
```

`validate_tokens` returns the tokens as a list, or raises
`TokenSyntaxError` (status 258) for a pipe or `&&`/`||` at the start or
without a following word, a redirection without a target word, or
unbalanced parentheses.

## Building the syntax tree

```python
from minishell.syntax_tree import build_tree

tree = build_tree(tokens)
```

Each `Node` has a `type`, a list of `args` for commands, a `file` for
redirections, and `left`/`right` children. A `PIPE` node has the command
before the pipe on the left and the rest of the line on the right.

`parse` builds the raw tree, in which a command keeps its redirections
in its `left` chain; `hoist_redirections` then moves each command below
its redirections, so the redirections come first. `build_tree` does
both and returns `None` when there is nothing to run. Only `WORD`, pipe
and redirection tokens enter the tree; other tokens are skipped.

## Exit status and errors

`minishell.status.ShellStatus` holds the last exit status, kept to one
byte, together with a set of `Flag` values (`SIGINT_PRESSED`,
`SIGQUIT_PRESSED`) managed with `set_flag`, `clear_flag` and `has_flag`.
`ShellError` is the base of the errors above and carries the exit status
in its `status` attribute. `print_error` writes a message in bold red to
a stream, standard error by default.

## String helpers

`minishell.cstring` offers `atoi`, `isint`, `itoa`, `split`, `strtrim`,
`substr`, `strnstr`, `strcmp`, `strcasecmp`, `strncmp` and `strlen_map`.
They treat a NUL character as the end of a string and follow C rules:
`atoi("  -42abc")` is `-42`, results wrap to 32 bits, and `strcmp`
returns the difference of the first differing characters.

## Formatting and reading lines

`minishell.printf.format_printf` handles the conversions
`%c %s %p %d %i %u %x %X %%` and returns the formatted text; `printf`
writes it to standard output and returns the number of characters
written.

`minishell.linereader.LineReader` wraps a text or binary stream and
returns one line at a time, newline included, reading `buffer_size`
characters at a time (1024 by default). `read_line` returns `None` once
the stream is exhausted; iterating yields every line:

```python
import io
from minishell.linereader import LineReader

for line in LineReader(io.StringIO("a\nb\n"), 4):
    print(repr(line))
```

## What it does not do

This package stops at the syntax tree. It does not run commands, expand
variables or wildcards, open redirection files, read heredocs, provide
built-in commands, group `&&`/`||` or parentheses into the tree, or
offer an interactive prompt or command-line program.