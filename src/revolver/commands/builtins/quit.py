"""Quit command - exit the REPL."""
from __future__ import annotations

from typing import TYPE_CHECKING

from revolver.commands.command import Command, NamedCommandParser
from revolver.core.datamodels import ApplyOutcome, Description

if TYPE_CHECKING:
    from revolver.looper import Looper


class Quit(Command):
    """Stops the run flag. The looper returns once control comes back to it."""

    def apply(self, looper: Looper) -> ApplyOutcome:
        looper.run_flag.stop()
        looper.terminal.print_line("Exiting.")
        return ApplyOutcome.APPLIED


class Parser(NamedCommandParser):
    def parse(self, s: str) -> Command:
        return self.parse_no_args(s, Quit)

    def shorthand(self) -> str:
        return "q"

    def name(self) -> str:
        return "quit"

    def description(self) -> Description:
        return Description(purpose="Exits the program.")
