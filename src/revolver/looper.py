"""
The mechanism for iteratively running commands based on successive user
input. This is the 'loop' part of the REPL.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

from pydantic import BaseModel, model_validator

from revolver.core.datamodels import ApplyOutcome
from revolver.core.exceptions import AccessTerminalError, ApplicationError

if TYPE_CHECKING:
    from revolver.commands.command import Command
    from revolver.commands.registry import CommandRegistry
    from revolver.terminal.base import Terminal

logger = logging.getLogger(__name__)


class RunState(Enum):
    RUNNING = "running"
    STOPPED = "stopped"


class RunFlag:
    """Whether the looper is running. A command stops the loop by calling stop()."""

    def __init__(self):
        self.state = RunState.STOPPED

    def start(self) -> None:
        self.state = RunState.RUNNING

    def stop(self) -> None:
        self.state = RunState.STOPPED

    def is_running(self) -> bool:
        return self.state is RunState.RUNNING

    def __repr__(self) -> str:
        return f"RunFlag({self.state.name})"


class Prompts(BaseModel):
    """Prompt strings, chosen by the outcome of the last command."""

    model_config = {"frozen": True}

    applied: str = "+>> "
    skipped: str = "->> "
    erred: str = "!>> "

    @model_validator(mode="after")
    def _distinct(self) -> Prompts:
        if len({self.applied, self.skipped, self.erred}) != 3:
            raise ValueError("applied, skipped and erred prompts must be distinct")
        return self


class LastOutcome(Enum):
    """The outcome of the last executed command."""

    APPLIED = "applied"
    SKIPPED = "skipped"
    ERRED = "erred"

    @classmethod
    def from_apply(cls, outcome: ApplyOutcome) -> LastOutcome:
        if outcome is ApplyOutcome.APPLIED:
            return cls.APPLIED
        if outcome is ApplyOutcome.SKIPPED:
            return cls.SKIPPED
        raise TypeError(f"Command.apply() must return an ApplyOutcome, got {outcome!r}")

    def prompt(self, prompts: Prompts) -> str:
        return getattr(prompts, self.value)


class Looper:
    """Controls the main application loop.

    Bundles the terminal, the command registry, a run flag and the caller's
    application context. The looper is lent to each command as it is
    applied, so a command can print, inspect the registry, mutate the
    context or stop the loop.

    Args:
        terminal: Device for interfacing with the user
        registry: Parses input lines into commands
        context: Application state; never reset by the looper
        prompts: Prompt strings (defaults to "+>> ", "->> ", "!>> ")
    """

    def __init__(
        self,
        terminal: Terminal,
        registry: CommandRegistry,
        context: Any = None,
        prompts: Optional[Prompts] = None,
    ):
        self.terminal = terminal
        self.registry = registry
        self.context = context
        self.prompts = prompts or Prompts()
        self.run_flag = RunFlag()

    def run(self) -> None:
        """Start the loop, blocking until a command stops the run flag.

        Application errors are printed and the loop carries on with the
        next input line. Only AccessTerminalError escapes.

        May be called repeatedly; each call restarts the run flag. Resetting
        the application context is up to the caller.

        Raises:
            AccessTerminalError: The terminal could not be read or written.
        """
        self.run_flag.start()
        last_outcome = LastOutcome.APPLIED
        logger.info("Looper started")

        try:
            while self.run_flag.is_running():
                command = read_command(self, last_outcome.prompt(self.prompts))
                logger.debug(f"Applying {type(command).__name__}")
                try:
                    outcome = command.apply(self)
                except ApplicationError as e:
                    logger.warning(f"Command error: {e}")
                    self.terminal.print_line(f"Command error: {e}.")
                    last_outcome = LastOutcome.ERRED
                else:
                    last_outcome = LastOutcome.from_apply(outcome)
        except AccessTerminalError as e:
            logger.error(f"Terminal access failed: {e}")
            raise

        logger.info("Looper stopped")


def read_command(looper: Looper, prompt: str) -> Command:
    """Prompt until an input line parses into a command."""
    return looper.terminal.read_value(prompt, looper.registry.parse)
