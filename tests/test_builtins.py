#!/usr/bin/env python3
"""
Tests for the built-in help and quit commands.
"""

import pytest

from revolver.commands import Command, CommandRegistry, NamedCommandParser
from revolver.commands.builtins import help, quit
from revolver.core import ApplyOutcome, Description, Example, ParseCommandError
from revolver.looper import Looper
from revolver.terminal import MockTerminal, lines


class Add(Command):
    def apply(self, looper):
        return ApplyOutcome.APPLIED


class AddParser(NamedCommandParser):
    def parse(self, s):
        return Add()

    def shorthand(self):
        return "a"

    def name(self):
        return "add"

    def description(self):
        return Description(
            purpose="Adds a value to the register.",
            usage="<value>",
            examples=[Example(scenario="adds 1.5 to the register", command="1.5")],
        )


class StatusParser(NamedCommandParser):
    def parse(self, s):
        return Add()

    def name(self):
        return "status"

    def description(self):
        return Description(purpose="Shows the status.")


@pytest.fixture
def registry():
    return CommandRegistry([StatusParser(), AddParser(), help.Parser(), quit.Parser()])


# ============================================================================
# Quit Tests
# ============================================================================

class TestQuit:
    """Tests for the quit command."""

    def test_parse_no_args(self):
        assert isinstance(quit.Parser().parse(""), quit.Quit)

    def test_parse_rejects_args(self):
        with pytest.raises(ParseCommandError) as exc:
            quit.Parser().parse("now")
        assert str(exc.value) == "invalid arguments to 'quit': 'now'"

    def test_apply_stops_loop(self, registry):
        term = MockTerminal()
        looper = Looper(term, registry)
        looper.run_flag.start()

        assert quit.Quit().apply(looper) is ApplyOutcome.APPLIED
        assert not looper.run_flag.is_running()
        assert term.printed() == ["Exiting.\n"]

    def test_identity(self):
        parser = quit.Parser()
        assert parser.name() == "quit"
        assert parser.shorthand() == "q"
        assert parser.description().purpose == "Exits the program."


# ============================================================================
# Help Tests
# ============================================================================

class TestHelp:
    """Tests for the help command."""

    def test_parse_rejects_args(self):
        with pytest.raises(ParseCommandError) as exc:
            help.Parser().parse("add")
        assert str(exc.value) == "invalid arguments to 'help': 'add'"

    def test_describe_with_examples(self):
        assert help.describe(AddParser()) == [
            "Adds a value to the register.",
            "usage: add <value>",
            "example - adds 1.5 to the register:",
            "    add 1.5",
        ]

    def test_describe_without_usage(self):
        assert help.describe(StatusParser()) == ["Shows the status.", "usage: status"]

    def test_render_order_and_labels(self, registry):
        rendered = help.render_commands(registry).splitlines()
        assert rendered[0].split() == ["Command", "Description"]
        labels = [line[:15].strip() for line in rendered[1:] if line[:15].strip()]
        assert labels == ["a, add", "h, help", "q, quit", "status"]

    def test_render_columns_aligned(self, registry):
        rendered = help.render_commands(registry).splitlines()
        offset = rendered[0].index("Description")
        assert rendered[1][offset:] == "Adds a value to the register."
        assert rendered[2][offset:] == "usage: add <value>"
        assert rendered[4][offset:] == "    add 1.5"

    def test_apply_prints_table(self, registry):
        term = MockTerminal(on_read_line=lines(["help", "quit"]))
        Looper(term, registry).run()

        printed = term.printed()
        assert printed[0] == "+>> "
        assert printed[1] == help.render_commands(registry) + "\n"
        assert printed[-1] == "Exiting.\n"
