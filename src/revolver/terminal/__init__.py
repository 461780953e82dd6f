"""
Text-based interface with the user: the 'read' and 'print' of the REPL.

PromptTerminal is imported lazily since it requires an interactive console.
"""

from revolver.terminal.base import Terminal
from revolver.terminal.mock import Invocation, MockTerminal, Print, ReadLine, lines
from revolver.terminal.streaming import StreamingTerminal, stream_reader, stream_writer


def __getattr__(name):
    if name == "PromptTerminal":
        from revolver.terminal.prompt import PromptTerminal
        return PromptTerminal
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "Terminal",
    "StreamingTerminal",
    "stream_reader",
    "stream_writer",
    "MockTerminal",
    "Invocation",
    "Print",
    "ReadLine",
    "lines",
    "PromptTerminal",
]
