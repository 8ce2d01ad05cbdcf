"""Line-oriented console I/O for the ATM session."""

import sys
from typing import Iterable, Protocol, TextIO


class Console(Protocol):
    """Minimal I/O capability the authenticator and session depend on."""

    def read_line(self, prompt: str = "") -> str | None:
        """Show ``prompt`` and return the next line, or None at end of input."""
        ...

    def write(self, text: str = "") -> None:
        """Emit one line of output."""
        ...


class StreamConsole:
    """Console bound to a pair of text streams (stdin/stdout by default)."""

    def __init__(self, input_stream: TextIO | None = None, output_stream: TextIO | None = None) -> None:
        self.input_stream = input_stream if input_stream is not None else sys.stdin
        self.output_stream = output_stream if output_stream is not None else sys.stdout

    def read_line(self, prompt: str = "") -> str | None:
        if prompt:
            self.output_stream.write(prompt)
            self.output_stream.flush()
        line = self.input_stream.readline()
        if line == "":
            return None
        return line.rstrip("\r\n")

    def write(self, text: str = "") -> None:
        self.output_stream.write(text + "\n")
        self.output_stream.flush()


class ScriptedConsole:
    """Console that replays scripted input lines and captures output.

    Prompts are captured alongside written lines so a full transcript can
    be asserted on.

    Parameters
    ----------
    lines : Iterable[str]
        Input lines returned in order by :meth:`read_line`. Once exhausted,
        ``read_line`` returns None.
    """

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self._pending = list(lines)
        self.prompts: list[str] = []
        self.output: list[str] = []

    def read_line(self, prompt: str = "") -> str | None:
        self.prompts.append(prompt)
        if not self._pending:
            return None
        return self._pending.pop(0)

    def write(self, text: str = "") -> None:
        self.output.append(text)

    @property
    def remaining(self) -> int:
        return len(self._pending)

    @property
    def text(self) -> str:
        """All written lines joined with newlines."""
        return "\n".join(self.output)
