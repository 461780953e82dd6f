"""
Mocking of a terminal device.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Union

from revolver.core.exceptions import AccessTerminalError
from revolver.terminal.base import Terminal


@dataclass(frozen=True)
class ReadLine:
    """A recorded read_line() call: the line read, or the error raised."""

    line: Optional[str] = None
    error: Optional[str] = None


@dataclass(frozen=True)
class Print:
    """A recorded print() call: the text printed, and the error raised (if any)."""

    text: str
    error: Optional[str] = None


Invocation = Union[ReadLine, Print]


class MockTerminal(Terminal):
    """Terminal with delegates for read_line() and print(), plus an invocation tracker.

    By default every read returns an empty string and every print succeeds.
    """

    def __init__(
        self,
        on_read_line: Optional[Callable[[], str]] = None,
        on_print: Optional[Callable[[str], None]] = None,
    ):
        self.on_read_line = on_read_line or (lambda: "")
        self.on_print = on_print or (lambda s: None)
        self.invocations: list[Invocation] = []

    def print(self, s: str) -> None:
        try:
            self.on_print(s)
        except AccessTerminalError as e:
            self.invocations.append(Print(s, str(e)))
            raise
        self.invocations.append(Print(s))

    def read_line(self) -> str:
        try:
            line = self.on_read_line()
        except AccessTerminalError as e:
            self.invocations.append(ReadLine(error=str(e)))
            raise
        self.invocations.append(ReadLine(line))
        return line

    def printed(self) -> list[str]:
        """Text of every successful print, in order."""
        return [inv.text for inv in self.invocations if isinstance(inv, Print) and inv.error is None]


def lines(items: Iterable[str]) -> Callable[[], str]:
    """Build a read_line delegate that returns one pre-canned line at a time.

    Once the lines are exhausted, the delegate raises AccessTerminalError.
    """
    remaining = deque(items)

    def read() -> str:
        if not remaining:
            raise AccessTerminalError("no more lines")
        return remaining.popleft()

    return read
