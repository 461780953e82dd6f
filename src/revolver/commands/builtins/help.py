"""Help command - show available commands."""
from __future__ import annotations

from typing import TYPE_CHECKING

from revolver.commands.command import Command, NamedCommandParser
from revolver.core.datamodels import ApplyOutcome, Description

if TYPE_CHECKING:
    from revolver.commands.registry import CommandRegistry
    from revolver.looper import Looper

COMMAND_WIDTH = 15


class Help(Command):
    """Prints every command known to the registry, with usage and examples."""

    def apply(self, looper: Looper) -> ApplyOutcome:
        looper.terminal.print_line(render_commands(looper.registry))
        return ApplyOutcome.APPLIED


class Parser(NamedCommandParser):
    def parse(self, s: str) -> Command:
        return self.parse_no_args(s, Help)

    def shorthand(self) -> str:
        return "h"

    def name(self) -> str:
        return "help"

    def description(self) -> Description:
        return Description(purpose="Displays a list of commands, their usage syntax and examples.")


def describe(parser: NamedCommandParser) -> list[str]:
    """Description column lines for one parser."""
    name = parser.name()
    desc = parser.description()
    lines = [desc.purpose, f"usage: {name} {desc.usage}".rstrip()]
    for example in desc.examples:
        lines.append(f"example - {example.scenario}:")
        lines.append(f"    {name} {example.command}")
    return lines


def render_commands(registry: CommandRegistry) -> str:
    """Render a two-column Command/Description table, in name order."""
    rows = []
    for parser in registry.parsers():
        shorthand = parser.shorthand()
        label = f"{shorthand}, {parser.name()}" if shorthand else parser.name()
        rows.append((label, describe(parser)))

    width = max([COMMAND_WIDTH] + [len(label) for label, _ in rows])
    out = [f"{'Command':<{width}}  Description"]
    for label, desc_lines in rows:
        out.append(f"{label:<{width}}  {desc_lines[0]}")
        for line in desc_lines[1:]:
            out.append(f"{'':<{width}}  {line}")
    return "\n".join(out)
