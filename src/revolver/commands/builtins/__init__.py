"""
Built-in commands.

Each module exposes a Parser that can be handed to a CommandRegistry
alongside the application's own parsers.
"""

from revolver.commands.builtins import help, quit

__all__ = ["help", "quit"]
