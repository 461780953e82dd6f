"""
revolver - a library for building REPL applications

Turns lines typed by the user into commands, applies them to
application state, and loops until a command stops it.

Example usage:
    from revolver import CommandRegistry, Looper, StreamingTerminal
    from revolver.commands.builtins import help, quit

    registry = CommandRegistry([AddParser(), help.Parser(), quit.Parser()])
    looper = Looper(StreamingTerminal(), registry, Register())
    looper.run()
"""

import logging

__version__ = "0.1.0"

from revolver.commands import (
    Command,
    CommandRegistry,
    Lint,
    NamedCommandParser,
    assert_lint,
    assert_pedantic,
    validate,
)
from revolver.core import (
    AccessTerminalError,
    ApplicationError,
    ApplyCommandError,
    ApplyOutcome,
    Description,
    Example,
    InvalidCommandParserSpec,
    LintError,
    ParseCommandError,
    RevolverError,
)
from revolver.looper import Looper, Prompts, RunFlag, RunState
from revolver.terminal import MockTerminal, StreamingTerminal, Terminal

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Commands
    "Command",
    "NamedCommandParser",
    "CommandRegistry",
    "Lint",
    "validate",
    "assert_pedantic",
    "assert_lint",
    # Models
    "ApplyOutcome",
    "Description",
    "Example",
    # Exceptions
    "RevolverError",
    "InvalidCommandParserSpec",
    "ParseCommandError",
    "ApplyCommandError",
    "ApplicationError",
    "AccessTerminalError",
    "LintError",
    # Loop
    "Looper",
    "Prompts",
    "RunFlag",
    "RunState",
    # Terminals
    "Terminal",
    "StreamingTerminal",
    "MockTerminal",
]
