#!/usr/bin/env python3
"""
A register calculator REPL (revolver-calc command).

Commands:
    add <value>       Adds a value to the register
    subtract <value>  Subtracts a value from the register
    divide <value>    Divides the register by a value
    print             Prints the register
    help, quit        Built-ins
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from pydantic import ValidationError

from revolver.commands import CommandRegistry, NamedCommandParser, load_parsers
from revolver.commands.builtins import help, quit
from revolver.commands.command import Command
from revolver.config import ConfigManager, get_config
from revolver.core import (
    AccessTerminalError,
    ApplicationError,
    ApplyOutcome,
    Description,
    Example,
    InvalidCommandParserSpec,
    ParseCommandError,
)
from revolver.logging import configure_logging
from revolver.looper import Looper
from revolver.terminal import StreamingTerminal

if TYPE_CHECKING:
    from revolver.terminal import Terminal


@dataclass
class Register:
    """The calculator's application context."""

    value: float = 0.0

    def print(self, terminal: Terminal) -> None:
        terminal.print_line(repr(self))


def parse_value(s: str) -> float:
    try:
        return float(s)
    except ValueError as e:
        raise ParseCommandError.convert(e) from e


class DivisionByZero(ApplicationError):
    """Raised by divide when the divisor is zero."""

    def __init__(self):
        super().__init__("division by zero")


# ============================================================================
# Commands
# ============================================================================

class Add(Command):
    def __init__(self, value: float):
        self.value = value

    def apply(self, looper: Looper) -> ApplyOutcome:
        looper.context.value += self.value
        looper.context.print(looper.terminal)
        return ApplyOutcome.APPLIED


class Subtract(Command):
    def __init__(self, value: float):
        self.value = value

    def apply(self, looper: Looper) -> ApplyOutcome:
        looper.context.value -= self.value
        looper.context.print(looper.terminal)
        return ApplyOutcome.APPLIED


class Divide(Command):
    def __init__(self, value: float):
        self.value = value

    def apply(self, looper: Looper) -> ApplyOutcome:
        if self.value == 0:
            raise DivisionByZero()
        looper.context.value /= self.value
        looper.context.print(looper.terminal)
        return ApplyOutcome.APPLIED


class Print(Command):
    def apply(self, looper: Looper) -> ApplyOutcome:
        looper.context.print(looper.terminal)
        return ApplyOutcome.APPLIED


# ============================================================================
# Parsers
# ============================================================================

class AddParser(NamedCommandParser):
    def parse(self, s: str) -> Command:
        return Add(parse_value(s))

    def shorthand(self) -> str:
        return "a"

    def name(self) -> str:
        return "add"

    def description(self) -> Description:
        return Description(
            purpose="Adds a value to the register.",
            usage="<value>",
            examples=[Example(scenario="adds 1.5 to the register", command="1.5")],
        )


class SubtractParser(NamedCommandParser):
    def parse(self, s: str) -> Command:
        return Subtract(parse_value(s))

    def shorthand(self) -> str:
        return "s"

    def name(self) -> str:
        return "subtract"

    def description(self) -> Description:
        return Description(
            purpose="Subtracts a value from the register.",
            usage="<value>",
            examples=[Example(scenario="subtracts 1.5 from the register", command="1.5")],
        )


class DivideParser(NamedCommandParser):
    def parse(self, s: str) -> Command:
        return Divide(parse_value(s))

    def shorthand(self) -> str:
        return "d"

    def name(self) -> str:
        return "divide"

    def description(self) -> Description:
        return Description(
            purpose="Divides the register by a non-zero value.",
            usage="<value>",
            examples=[Example(scenario="halves the register", command="2")],
        )


class PrintParser(NamedCommandParser):
    def parse(self, s: str) -> Command:
        return self.parse_no_args(s, Print)

    def shorthand(self) -> str:
        return "p"

    def name(self) -> str:
        return "print"

    def description(self) -> Description:
        return Description(purpose="Prints the contents of the register.")


def calculator_parsers() -> list[NamedCommandParser]:
    """The calculator's own parsers plus the built-ins."""
    return [
        AddParser(),
        PrintParser(),
        SubtractParser(),
        DivideParser(),
        help.Parser(),
        quit.Parser(),
    ]


def build_registry(commands_dir: Optional[Path] = None) -> CommandRegistry:
    """Create the registry, including any plugin commands from commands_dir."""
    parsers = calculator_parsers()
    if commands_dir is not None:
        parsers.extend(load_parsers(commands_dir))
    return CommandRegistry(parsers)


def make_terminal(simple: bool, registry: CommandRegistry) -> Terminal:
    if simple:
        return StreamingTerminal()
    from revolver.terminal.prompt import PromptTerminal
    return PromptTerminal(completions=registry.identifiers())


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the revolver-calc CLI."""
    parser = argparse.ArgumentParser(
        description="A register calculator REPL",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    revolver-calc                       Interactive session
    revolver-calc --simple < input.txt  Plain stdin/stdout
    revolver-calc --log-file calc.log --log-level DEBUG
        """,
    )
    parser.add_argument("--simple", action="store_true", default=None,
                        help="Use plain stdin/stdout instead of prompt_toolkit")
    parser.add_argument("--config", type=Path, help="Config file (default: ~/.revolver/config.json)")
    parser.add_argument("--log-level", help="Log level (DEBUG, INFO, WARNING, ERROR)")
    parser.add_argument("--log-file", type=Path, help="Write logs to this file")
    parser.add_argument("--commands-dir", type=Path, help="Directory of additional command packages")
    args = parser.parse_args(argv)

    config = ConfigManager(args.config).config if args.config else get_config()

    log_file = args.log_file or config.get("log_file")
    if log_file:
        try:
            configure_logging(args.log_level or config.get("log_level"), Path(log_file))
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2

    commands_dir = args.commands_dir or config.get("commands_dir")
    try:
        registry = build_registry(Path(commands_dir) if commands_dir else None)
        prompts = config.prompts()
    except (InvalidCommandParserSpec, ValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    simple = args.simple if args.simple is not None else config.get("simple")
    terminal = make_terminal(simple, registry)

    looper = Looper(terminal, registry, Register(), prompts=prompts)
    try:
        looper.run()
    except AccessTerminalError as e:
        print(f"\nError: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
