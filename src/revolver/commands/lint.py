"""
Linting of command descriptions.

Lints are documentation-quality rules; they are usually asserted from the
command author's tests rather than at runtime:

    def test_lint():
        assert_pedantic(AddParser())
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from revolver.commands.command import NamedCommandParser
from revolver.core.datamodels import Description, Example
from revolver.core.exceptions import LintError


class Lint(Enum):
    """A failed documentation rule."""

    PURPOSE_HAS_EXCESS_WHITESPACE = "purpose_has_excess_whitespace"
    PURPOSE_IS_EMPTY = "purpose_is_empty"
    PURPOSE_DOES_NOT_BEGIN_WITH_UPPERCASE = "purpose_does_not_begin_with_uppercase"
    PURPOSE_DOES_NOT_END_WITH_PERIOD = "purpose_does_not_end_with_period"
    USAGE_HAS_EXCESS_WHITESPACE = "usage_has_excess_whitespace"
    USAGE_BEGINS_WITH_COMMAND_NAME = "usage_begins_with_command_name"
    EXAMPLE_SCENARIO_HAS_EXCESS_WHITESPACE = "example_scenario_has_excess_whitespace"
    EXAMPLE_SCENARIO_IS_EMPTY = "example_scenario_is_empty"
    EXAMPLE_SCENARIO_BEGINS_WITH_UPPERCASE = "example_scenario_begins_with_uppercase"
    EXAMPLE_SCENARIO_ENDS_WITH_PERIOD = "example_scenario_ends_with_period"
    EXAMPLE_COMMAND_HAS_EXCESS_WHITESPACE = "example_command_has_excess_whitespace"
    EXAMPLE_COMMAND_IS_EMPTY = "example_command_is_empty"
    EXAMPLE_COMMAND_BEGINS_WITH_COMMAND_NAME = "example_command_begins_with_command_name"

    def check(self, condition: bool, failed: list[Lint]) -> bool:
        """Record this lint if condition does not hold. Returns condition."""
        if not condition:
            failed.append(self)
        return condition


def validate(parser: NamedCommandParser) -> list[Lint]:
    """Validate a parser's description, returning the failed lints in order."""
    failed: list[Lint] = []
    _validate_description(parser.name(), parser.description(), failed)
    return failed


def assert_pedantic(parser: NamedCommandParser) -> None:
    """Raise LintError if any lint fails."""
    assert_lint(parser, ())


def assert_lint(parser: NamedCommandParser, exclusions: Iterable[Lint] = ()) -> None:
    """Raise LintError for the first failed lint not listed in exclusions."""
    excluded = set(exclusions)
    for lint in validate(parser):
        if lint not in excluded:
            raise LintError(f"failed lint: {lint.name}")


def _validate_description(command_name: str, desc: Description, failed: list[Lint]) -> None:
    purpose, usage = desc.purpose, desc.usage

    _no_excess_whitespace(purpose, Lint.PURPOSE_HAS_EXCESS_WHITESPACE, failed)
    if Lint.PURPOSE_IS_EMPTY.check(bool(purpose), failed):
        # Whitespace is linted separately; judge the sentence by its trimmed form
        trimmed = purpose.strip()
        Lint.PURPOSE_DOES_NOT_BEGIN_WITH_UPPERCASE.check(trimmed[:1].isupper(), failed)
        Lint.PURPOSE_DOES_NOT_END_WITH_PERIOD.check(trimmed.endswith("."), failed)

    _no_excess_whitespace(usage, Lint.USAGE_HAS_EXCESS_WHITESPACE, failed)
    if usage:
        Lint.USAGE_BEGINS_WITH_COMMAND_NAME.check(not usage.startswith(command_name), failed)

    for example in desc.examples:
        _validate_example(command_name, example, failed)


def _validate_example(command_name: str, example: Example, failed: list[Lint]) -> None:
    scenario, command = example.scenario, example.command

    _no_excess_whitespace(scenario, Lint.EXAMPLE_SCENARIO_HAS_EXCESS_WHITESPACE, failed)
    if Lint.EXAMPLE_SCENARIO_IS_EMPTY.check(bool(scenario), failed):
        trimmed = scenario.strip()
        Lint.EXAMPLE_SCENARIO_BEGINS_WITH_UPPERCASE.check(not trimmed[:1].isupper(), failed)
        Lint.EXAMPLE_SCENARIO_ENDS_WITH_PERIOD.check(not trimmed.endswith("."), failed)

    _no_excess_whitespace(command, Lint.EXAMPLE_COMMAND_HAS_EXCESS_WHITESPACE, failed)
    if Lint.EXAMPLE_COMMAND_IS_EMPTY.check(bool(command), failed):
        Lint.EXAMPLE_COMMAND_BEGINS_WITH_COMMAND_NAME.check(
            not command.startswith(command_name), failed
        )


def _no_excess_whitespace(s: str, lint: Lint, failed: list[Lint]) -> None:
    lint.check(s.strip() == s, failed)
