import io

import pytest

from minishell.status import (
    BOLD_RED,
    RESET,
    Flag,
    ShellError,
    ShellStatus,
    print_error,
)


def test_default_exit_status_is_zero():
    assert ShellStatus().exit_status == 0


@pytest.mark.parametrize("status", [0, 1, 2, 130, 255])
def test_exit_status_in_range_is_kept(status):
    shell = ShellStatus()
    shell.exit_status = status
    assert shell.exit_status == status


@pytest.mark.parametrize("status", [0, 1, 2, 127, 200])
def test_exit_status_wraps_at_one_byte(status):
    shell = ShellStatus()
    shell.exit_status = status + 256
    assert shell.exit_status == status


def test_exit_status_never_leaves_byte_range():
    shell = ShellStatus()
    for value in range(-300, 1000, 7):
        shell.exit_status = value
        assert 0 <= shell.exit_status <= 255


def test_flags_set_and_clear_independently():
    shell = ShellStatus()
    shell.set_flag(Flag.SIGINT_PRESSED)
    shell.set_flag(Flag.SIGQUIT_PRESSED)
    assert shell.has_flag(Flag.SIGINT_PRESSED)
    assert shell.has_flag(Flag.SIGQUIT_PRESSED)
    shell.clear_flag(Flag.SIGINT_PRESSED)
    assert not shell.has_flag(Flag.SIGINT_PRESSED)
    assert shell.has_flag(Flag.SIGQUIT_PRESSED)


def test_flags_do_not_touch_exit_status():
    shell = ShellStatus(130)
    shell.set_flag(Flag.SIGINT_PRESSED)
    shell.clear_flag(Flag.SIGINT_PRESSED)
    assert shell.exit_status == 130


def test_clearing_unset_flag_keeps_nothing_raised():
    shell = ShellStatus()
    shell.clear_flag(Flag.SIGQUIT_PRESSED)
    assert not shell.has_flag(Flag.SIGQUIT_PRESSED)
    assert shell.flags == Flag(0)


def test_shell_error_defaults_to_status_one():
    err = ShellError("boom")
    assert err.status == 1
    assert str(err) == "boom"


def test_shell_error_keeps_status():
    err = ShellError("Error: unmatched quote", 258 & 0xFF)
    assert err.status == 258 & 0xFF
    assert err.message == "Error: unmatched quote"


def test_print_error_wraps_in_colour():
    stream = io.StringIO()
    print_error("Syntax error: invalid pipe sequence", stream)
    text = stream.getvalue()
    assert text == BOLD_RED + "Syntax error: invalid pipe sequence\n" + RESET