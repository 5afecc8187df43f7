# input_reader.py - text to check comes from a file or from piped stdin

from __future__ import annotations

import sys
from typing import Iterator, Optional, TextIO


class InputError(Exception):
    """Raised when there is nothing to read from."""


def stdin_is_piped(stream: Optional[TextIO] = None) -> bool:
    stream = stream if stream is not None else sys.stdin
    if stream is None:
        return False
    isatty = getattr(stream, "isatty", None)
    return not (isatty and isatty())


def read_lines(path: Optional[str] = None, stream: Optional[TextIO] = None) -> Iterator[str]:
    """
    Yield lines without their trailing newline.
    path given -> read that file (OSError propagates).
    otherwise -> read `stream` (default sys.stdin) if it is piped, else InputError.
    """
    if path:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            for line in f:
                yield line.rstrip("\r\n")
        return

    stream = stream if stream is not None else sys.stdin
    if not stdin_is_piped(stream):
        raise InputError("Provide a file path or pipe some data in.")
    for line in stream:
        yield line.rstrip("\r\n")
