"""
Core module for the revolver package.

Provides the data models and error taxonomy shared by every layer.
"""

from revolver.core.datamodels import ApplyOutcome, Description, Example
from revolver.core.exceptions import (
    AccessTerminalError,
    ApplicationError,
    ApplyCommandError,
    InvalidCommandParserSpec,
    LintError,
    ParseCommandError,
    RevolverError,
)

__all__ = [
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
]
