"""
Interactive terminal using prompt_toolkit.

Provides in-session history, tab completion of command identifiers and line
editing. History is kept in memory only.
"""

from __future__ import annotations

from typing import Iterable, Optional

from prompt_toolkit import PromptSession, print_formatted_text
from prompt_toolkit.auto_suggest import AutoSuggestFromHistory
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import InMemoryHistory

from revolver.core.exceptions import AccessTerminalError
from revolver.terminal.base import Terminal


class PromptTerminal(Terminal):
    """Terminal backed by a prompt_toolkit PromptSession.

    Text printed without a trailing newline is held back and used as the
    message of the next prompt, so read_value() prompts render natively.
    """

    def __init__(
        self,
        completions: Optional[Iterable[str]] = None,
        session: Optional[PromptSession] = None,
    ):
        if session is None:
            completer = WordCompleter(sorted(completions), sentence=True) if completions else None
            session = PromptSession(
                history=InMemoryHistory(),
                auto_suggest=AutoSuggestFromHistory(),
                completer=completer,
            )
        self.session = session
        self._pending = ""

    def print(self, s: str) -> None:
        text = self._pending + s
        self._pending = ""
        head, sep, tail = text.rpartition("\n")
        if sep:
            try:
                print_formatted_text(head)
            except OSError as e:
                raise AccessTerminalError(str(e)) from e
        self._pending = tail

    def read_line(self) -> str:
        message, self._pending = self._pending, ""
        try:
            return self.session.prompt(message)
        except EOFError as e:
            raise AccessTerminalError("end of input") from e
        except KeyboardInterrupt as e:
            raise AccessTerminalError("interrupted") from e
        except OSError as e:
            raise AccessTerminalError(str(e)) from e
