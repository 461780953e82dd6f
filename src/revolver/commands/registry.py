"""
Command registry: compiles command parsers into a dispatch table and
resolves input lines into executable commands.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from revolver.commands.command import Command, NamedCommandParser
from revolver.core.exceptions import InvalidCommandParserSpec, ParseCommandError

logger = logging.getLogger(__name__)

MIN_NAME_LENGTH = 2


def _duplicate_error(key: str) -> InvalidCommandParserSpec:
    return InvalidCommandParserSpec(f"duplicate command parser for '{key}'")


def _check(key: str, table: dict[str, int]) -> None:
    """Fail if key is already present in table."""
    if key in table:
        raise _duplicate_error(key)


def _insert(key: str, index: int, table: dict[str, int]) -> None:
    """Insert key into table, failing on a duplicate."""
    _check(key, table)
    table[key] = index


class CommandRegistry:
    """Read-only dispatch table over a fixed list of command parsers.

    Construction validates the parsers and is all-or-nothing: any problem
    raises InvalidCommandParserSpec and no registry is produced.

    Example:
        registry = CommandRegistry([AddParser(), help.Parser(), quit.Parser()])
        command = registry.parse("add 1.5")
    """

    def __init__(self, parsers: Iterable[NamedCommandParser]):
        parsers = list(parsers)
        by_shorthand: dict[str, int] = {}
        by_name: dict[str, int] = {}

        try:
            for index, parser in enumerate(parsers):
                # All example commands must be parsable; any ValueError counts as a parse failure
                for example in parser.description().examples:
                    try:
                        parser.parse(example.command)
                    except ValueError as e:
                        raise InvalidCommandParserSpec(
                            f"unparsable example command '{example.command}': {e}"
                        ) from e

                shorthand = parser.shorthand()
                if shorthand is not None:
                    _check(shorthand, by_name)
                    _insert(shorthand, index, by_shorthand)

                name = parser.name()
                if len(name) < MIN_NAME_LENGTH:
                    raise InvalidCommandParserSpec(
                        f"invalid command name '{name}': must contain at least 2 characters"
                    )

                _check(name, by_shorthand)
                _insert(name, index, by_name)
                logger.debug(f"Registered command parser: {name} (shorthand: {shorthand})")
        except InvalidCommandParserSpec as e:
            logger.warning(f"Rejected command parsers: {e}")
            raise

        self._parsers = parsers
        self._by_shorthand = by_shorthand
        self._by_name = by_name

    def get(self, identifier: str) -> Optional[NamedCommandParser]:
        """Get a parser by shorthand or name. Shorthands are checked first."""
        index = self._by_shorthand.get(identifier)
        if index is None:
            index = self._by_name.get(identifier)
        if index is None:
            return None
        return self._parsers[index]

    def parse(self, s: str) -> Command:
        """Parse an input line into a Command.

        The input takes the form `<identifier> [<args>]`, where the identifier
        is a name or shorthand. Everything after the first space is passed
        to the matched parser verbatim.

        Raises:
            ParseCommandError: If no command could be constructed.
        """
        if not s:
            raise ParseCommandError("empty command string")

        identifier, _, args = s.partition(" ")
        parser = self.get(identifier)
        if parser is None:
            raise ParseCommandError(f"no command parser for '{identifier}'")
        return parser.parse(args)

    def parsers(self) -> list[NamedCommandParser]:
        """All parsers, sorted by name."""
        return [self._parsers[index] for _, index in sorted(self._by_name.items())]

    def identifiers(self) -> list[str]:
        """All names and shorthands, sorted. Used for completion."""
        return sorted([*self._by_name, *self._by_shorthand])

    def __contains__(self, identifier: str) -> bool:
        return self.get(identifier) is not None

    def __iter__(self) -> Iterator[NamedCommandParser]:
        return iter(self.parsers())

    def __len__(self) -> int:
        return len(self._parsers)
