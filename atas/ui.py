from __future__ import annotations

import sys
from typing import Optional, TextIO


class Ui:
    """
    Line-oriented terminal I/O. Streams are injectable so a session can be
    driven from a string in tests.
    """

    def __init__(self, in_stream: Optional[TextIO] = None, out_stream: Optional[TextIO] = None) -> None:
        self.in_stream = in_stream if in_stream is not None else sys.stdin
        self.out_stream = out_stream if out_stream is not None else sys.stdout

    def show(self, *lines: str) -> None:
        for line in lines:
            print(line, file=self.out_stream)

    def read_line(self) -> Optional[str]:
        """Next input line without its newline, or None at end of input."""
        line = self.in_stream.readline()
        if not line:
            return None
        return line.rstrip("\r\n")
