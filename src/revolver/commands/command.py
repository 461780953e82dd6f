"""
Contract of an executable command and of a parser for building command
instances from user input. This is the 'eval' part of the REPL.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable, Optional

from revolver.core.datamodels import ApplyOutcome, Description
from revolver.core.exceptions import ParseCommandError

if TYPE_CHECKING:
    from revolver.looper import Looper


class Command(ABC):
    """An executable action, produced by a successful parse and applied once."""

    @abstractmethod
    def apply(self, looper: Looper) -> ApplyOutcome:
        """Apply the command.

        The looper lends access to the terminal, the registry, the run flag
        and the application context for the duration of the call.

        Returns:
            ApplyOutcome.APPLIED or ApplyOutcome.SKIPPED.

        Raises:
            ApplicationError: Recoverable, domain-specific failure.
            AccessTerminalError: The terminal could not be accessed.
        """


class NamedCommandParser(ABC):
    """Builds Command objects from the argument part of an input line."""

    @abstractmethod
    def parse(self, s: str) -> Command:
        """Parse the argument text (everything after the command identifier).

        Raises:
            ParseCommandError: If the arguments are malformed.
        """

    @abstractmethod
    def name(self) -> str:
        """The complete name of the command, as typed by the user."""

    def shorthand(self) -> Optional[str]:
        """Optional short moniker the user may type instead of the name."""
        return None

    @abstractmethod
    def description(self) -> Description:
        """Describes the command for the help listing."""

    def parse_no_args(self, s: str, ctor: Callable[[], Command]) -> Command:
        """Build a command with ctor(), provided no arguments were given."""
        if s:
            raise ParseCommandError(f"invalid arguments to '{self.name()}': '{s}'")
        return ctor()
