"""
Terminal device composed over input/output streams.

The default adapters delegate to stdin and stdout; custom streams can be
plugged in by supplying a reader or writer callable.
"""

from __future__ import annotations

import sys
from typing import Callable, Optional, TextIO

from revolver.core.exceptions import AccessTerminalError
from revolver.terminal.base import Terminal

InputReader = Callable[[], str]
OutputWriter = Callable[[str], None]


def stream_reader(stream: Optional[TextIO] = None) -> InputReader:
    """Reader over a text stream (stdin if None, resolved on each call).

    End of input is reported as an AccessTerminalError.
    """
    def read() -> str:
        source = stream if stream is not None else sys.stdin
        try:
            line = source.readline()
        except OSError as e:
            raise AccessTerminalError(str(e)) from e
        if not line:
            raise AccessTerminalError("end of input")
        return line.rstrip("\r\n")

    return read


def stream_writer(stream: Optional[TextIO] = None) -> OutputWriter:
    """Writer over a text stream (stdout if None), flushing after each write."""
    def write(s: str) -> None:
        sink = stream if stream is not None else sys.stdout
        try:
            sink.write(s)
            sink.flush()
        except OSError as e:
            raise AccessTerminalError(str(e)) from e

    return write


class StreamingTerminal(Terminal):
    """Terminal implementation over stream-like reader/writer callables."""

    def __init__(
        self,
        reader: Optional[InputReader] = None,
        writer: Optional[OutputWriter] = None,
    ):
        self.reader = reader or stream_reader()
        self.writer = writer or stream_writer()

    @classmethod
    def from_streams(cls, input_stream: TextIO, output_stream: TextIO) -> StreamingTerminal:
        """Create a terminal over arbitrary text streams (files, StringIO, ...)."""
        return cls(stream_reader(input_stream), stream_writer(output_stream))

    def print(self, s: str) -> None:
        self.writer(s)

    def read_line(self) -> str:
        return self.reader()
