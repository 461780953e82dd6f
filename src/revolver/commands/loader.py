"""
Command loader - discovers and loads command parsers from a directory.

Each command lives in its own subdirectory with an __init__.py that exposes
a PARSERS list:

    # ~/.revolver/commands/greet/__init__.py
    from revolver import ApplyOutcome, Command, Description, NamedCommandParser

    class Greet(Command):
        def apply(self, looper):
            looper.terminal.print_line("Hello!")
            return ApplyOutcome.APPLIED

    class GreetParser(NamedCommandParser):
        def parse(self, s):
            return self.parse_no_args(s, Greet)

        def name(self):
            return "greet"

        def description(self):
            return Description(purpose="Says hello.")

    PARSERS = [GreetParser()]

The loaded parsers are passed to a CommandRegistry with the built-ins.
"""

from __future__ import annotations

import logging
import sys
from importlib.util import module_from_spec, spec_from_file_location
from pathlib import Path
from types import ModuleType

from revolver.commands.command import NamedCommandParser

logger = logging.getLogger(__name__)

# Default user commands directory
USER_COMMANDS_DIR = Path.home() / ".revolver" / "commands"


def discover_commands(commands_dir: Path) -> list[Path]:
    """
    Discover command directories in the given path.

    Args:
        commands_dir: Directory to search

    Returns:
        List of __init__.py paths, sorted by directory name.
    """
    if not commands_dir.exists():
        return []

    if not commands_dir.is_dir():
        logger.warning(f"Commands path is not a directory: {commands_dir}")
        return []

    cmd_paths = []
    for subdir in sorted(commands_dir.iterdir()):
        if not subdir.is_dir():
            continue
        # Skip hidden and private directories
        if subdir.name.startswith((".", "_")):
            continue
        init_file = subdir / "__init__.py"
        if init_file.exists():
            cmd_paths.append(init_file)
        else:
            logger.debug(f"Skipping {subdir.name}: no __init__.py")

    return cmd_paths


def load_command(cmd_path: Path, prefix: str = "revolver_cmd") -> ModuleType:
    """
    Import a single command module.

    Args:
        cmd_path: Path to the command's __init__.py file.
        prefix: Module name prefix for sys.modules

    Returns:
        The imported module.

    Raises:
        ImportError: If no module spec could be created or the import failed.
    """
    module_name = f"{prefix}.{cmd_path.parent.name}"
    spec = spec_from_file_location(module_name, cmd_path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Could not create module spec for {cmd_path}")

    module = module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except BaseException:
        del sys.modules[module_name]
        raise
    return module


def load_parsers(commands_dir: Path | None = None) -> list[NamedCommandParser]:
    """
    Load the command parsers exposed by every command in a directory.

    Commands that fail to import, or expose no PARSERS, are logged and skipped.

    Args:
        commands_dir: Commands directory (default: ~/.revolver/commands)

    Returns:
        Parsers in directory order.
    """
    commands_dir = commands_dir or USER_COMMANDS_DIR
    parsers: list[NamedCommandParser] = []

    for cmd_path in discover_commands(commands_dir):
        cmd_name = cmd_path.parent.name
        try:
            module = load_command(cmd_path)
        except SyntaxError as e:
            logger.warning(f"Failed to load command '{cmd_name}': Syntax error: {e}")
            continue
        except ImportError as e:
            logger.warning(f"Failed to load command '{cmd_name}': Import error: {e}")
            continue
        except Exception as e:
            logger.warning(f"Failed to load command '{cmd_name}': Error: {e}")
            continue

        found = getattr(module, "PARSERS", None)
        if not found:
            logger.warning(f"Command '{cmd_name}' exposes no PARSERS")
            continue

        for parser in found:
            if not isinstance(parser, NamedCommandParser):
                logger.warning(f"Command '{cmd_name}': ignoring non-parser {parser!r}")
                continue
            parsers.append(parser)
        logger.info(f"Loaded command: {cmd_name}")

    return parsers
