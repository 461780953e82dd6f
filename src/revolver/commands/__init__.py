"""
Command system: the executable command contract, the registry that
dispatches input lines to parsers, description linting and built-ins.
"""

from __future__ import annotations

from revolver.commands.command import Command, NamedCommandParser
from revolver.commands.lint import Lint, assert_lint, assert_pedantic, validate
from revolver.commands.loader import load_parsers
from revolver.commands.registry import CommandRegistry

__all__ = [
    "Command",
    "NamedCommandParser",
    "CommandRegistry",
    "Lint",
    "validate",
    "assert_pedantic",
    "assert_lint",
    "load_parsers",
]
