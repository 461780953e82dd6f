"""
Data models shared by commands, the registry and the looper.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class ApplyOutcome(Enum):
    """The outcome of applying a command."""

    # Executed, with all side effects applied to the application state.
    APPLIED = "applied"
    # Aborted without an error, e.g. at the user's request.
    SKIPPED = "skipped"


class Example(BaseModel):
    """An example of using a command."""

    model_config = {"frozen": True}

    # Part-sentence: lowercase start, no trailing period.
    scenario: str = ""
    # Sample arguments, without the command name.
    command: str = ""


class Description(BaseModel):
    """A comprehensive description of a command, shown by the help command."""

    model_config = {"frozen": True}

    purpose: str = Field(
        default="",
        description="Why the command exists. One or more fully punctuated sentences.",
    )
    usage: str = Field(
        default="",
        description="Argument syntax, without the command name. Blank if there are no arguments.",
    )
    examples: tuple[Example, ...] = Field(default_factory=tuple)
