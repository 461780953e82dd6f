"""
Exception classes for the REPL engine.
"""

from __future__ import annotations

from typing import Any


class RevolverError(Exception):
    """Base exception for REPL engine errors."""


class InvalidCommandParserSpec(RevolverError):
    """Command parsers were incorrectly specified or conflict amongst themselves."""


class ParseCommandError(RevolverError, ValueError):
    """A string could not be parsed into a command object."""

    @classmethod
    def convert(cls, err: Any) -> ParseCommandError:
        """Wrap anything with a string representation, e.g. a ValueError from int()."""
        return cls(str(err))


class ApplyCommandError(RevolverError):
    """A command could not be executed.

    Either an ApplicationError (recoverable, owned by the embedding
    application) or an AccessTerminalError (fatal).
    """

    def application(self) -> Any | None:
        """Return the application error payload, or None for other variants."""
        return None

    def access_terminal(self) -> AccessTerminalError | None:
        """Return the terminal error, or None for other variants."""
        return None


class ApplicationError(ApplyCommandError):
    """Domain-specific, recoverable error raised from Command.apply().

    The payload may be any object; its string form is shown to the user.
    Applications may also subclass this for their own error types.
    """

    def __init__(self, payload: Any = None):
        self.payload = payload
        super().__init__(payload)

    def __str__(self) -> str:
        return str(self.payload)

    def application(self) -> Any | None:
        return self.payload


class AccessTerminalError(ApplyCommandError):
    """The terminal device could not be accessed for reading or writing."""

    def access_terminal(self) -> AccessTerminalError | None:
        return self


class LintError(RevolverError, AssertionError):
    """A command parser failed description linting."""
