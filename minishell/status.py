"""Exit status, pending-signal flags and error reporting for the shell."""

from __future__ import annotations

import enum
import sys
from typing import TextIO

BOLD_RED = "\033[1;31m"
RESET = "\033[0m"

EXIT_STATUS_MASK = 0xFF


class Flag(enum.IntFlag):
    """Flags raised asynchronously (by signal handlers) and consumed later."""

    SIGINT_PRESSED = 1 << 0
    SIGQUIT_PRESSED = 1 << 1


class ShellError(Exception):
    """An error that carries the exit status the shell should report."""

    def __init__(self, message: str, status: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.status = status & EXIT_STATUS_MASK


class ShellStatus:
    """Holds the last exit status and any pending flags."""

    def __init__(self, exit_status: int = 0) -> None:
        self._exit_status = 0
        self.flags = Flag(0)
        self.exit_status = exit_status

    @property
    def exit_status(self) -> int:
        """The last exit status, always in the range 0-255."""
        return self._exit_status

    @exit_status.setter
    def exit_status(self, status: int) -> None:
        self._exit_status = status & EXIT_STATUS_MASK

    def set_flag(self, flag: Flag) -> None:
        """Raise ``flag``, keeping any flags already set."""
        self.flags |= flag

    def clear_flag(self, flag: Flag) -> None:
        """Lower ``flag``, leaving the others untouched."""
        self.flags &= ~flag

    def has_flag(self, flag: Flag) -> bool:
        """Tell whether every bit of ``flag`` is currently raised."""
        return bool(flag) and (self.flags & flag) == flag

    def __repr__(self) -> str:
        return f"ShellStatus(exit_status={self._exit_status}, flags={self.flags!r})"


def print_error(message: str, stream: TextIO | None = None) -> None:
    """Write ``message`` in bold red on its own line to ``stream`` (stderr by default)."""
    out = sys.stderr if stream is None else stream
    out.write(f"{BOLD_RED}{message}\n{RESET}")
    out.flush()