"""
Abstract text-based interface with the user.

Ordinarily a terminal wraps stdin and stdout; keeping the device behind this
interface allows user interactions to be scripted in tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, TypeVar

V = TypeVar("V")


class Terminal(ABC):
    """A text-based I/O device.

    Every operation may raise AccessTerminalError if the device could not be
    accessed for reading or writing.
    """

    @abstractmethod
    def print(self, s: str) -> None:
        """Print a string to the output device."""

    def print_line(self, s: str) -> None:
        """Print a string with a trailing newline."""
        self.print(s + "\n")

    @abstractmethod
    def read_line(self) -> str:
        """Read a complete line, blocking until input is available."""

    def read_value(self, prompt: str, parser: Callable[[str], V]) -> V:
        """Read a value using the supplied parser.

        The user is prompted repeatedly until the parser returns without
        raising ValueError. Parse errors are printed, never propagated.

        Args:
            prompt: Text printed before each read
            parser: Called with the stripped input line

        Returns:
            The parsed value.
        """
        while True:
            self.print(prompt)
            read = self.read_line()
            try:
                return parser(read.strip())
            except ValueError as e:
                self.print_line(f"Invalid input: {e}.")

    def read_from_str(self, prompt: str, type_: Callable[[str], V]) -> V:
        """Read a value of any type constructible from a string (int, float, ...)."""
        return self.read_value(prompt, type_)

    def read_from_str_default(self, prompt: str, type_: Callable[..., V]) -> V:
        """Like read_from_str(), but a blank line yields type_() instead."""
        def parser(s: str) -> V:
            if not s:
                return type_()
            return type_(s)

        return self.read_value(prompt, parser)
