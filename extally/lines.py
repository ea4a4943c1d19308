# extally/lines.py

from __future__ import annotations
from typing import BinaryIO, Iterator


class InputDecodeError(ValueError):
    """Raised when an input line is not valid UTF-8."""

    def __init__(self, lineno: int, exc: UnicodeDecodeError):
        super().__init__(f"line {lineno}: invalid UTF-8 ({exc.reason} at byte {exc.start})")
        self.lineno = lineno
        self.exc = exc


def iter_lines(stream: BinaryIO) -> Iterator[str]:
    """Iterate over the lines of a binary stream, decoded as UTF-8.

    Line terminators (``\\n`` and ``\\r\\n``) are removed. A last line
    without a terminator is still yielded.

    Args:
        stream (BinaryIO): Stream to read, usually ``sys.stdin.buffer``.

    Yields:
        str: Each decoded line.

    Raises:
        InputDecodeError: If a line contains malformed UTF-8.
    """
    for lineno, raw in enumerate(stream, start=1):
        if raw.endswith(b"\n"):
            raw = raw[:-1]
            if raw.endswith(b"\r"):
                raw = raw[:-1]
        try:
            line = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InputDecodeError(lineno, exc) from exc
        yield line
