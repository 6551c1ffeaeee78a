"""Reading a here-document from standard input."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import TextIO

HERE_DOC = "here_doc"
HERE_DOC_PREFIX = "> "


def has_here_doc(argument: str) -> bool:
    """Tell whether ``argument`` selects here-document mode.

    Any prefix of ``here_doc`` is accepted, as the comparison is bounded by
    the argument's own length.
    """
    return HERE_DOC.startswith(argument)


def line_matches_limiter(line: str, limiter: str) -> bool:
    """Tell whether ``line`` ends the here-document.

    ``limiter`` carries its trailing newline; the comparison is bounded by
    the length of ``line``.
    """
    return limiter.startswith(line)


def iter_lines(stream: TextIO) -> Iterator[str]:
    """Yield lines from ``stream`` with their newlines, until end of input."""
    while True:
        line = stream.readline()
        if not line:
            return
        yield line


def read_here_doc(
    limiter: str,
    stdin: TextIO | None = None,
    prompt: TextIO | None = None,
) -> str:
    """Collect lines up to ``limiter`` or end of input, prompting before each."""
    source = sys.stdin if stdin is None else stdin
    out = sys.stdout if prompt is None else prompt
    terminator = limiter + "\n"
    body: list[str] = []

    def ask() -> None:
        out.write(HERE_DOC_PREFIX)
        out.flush()

    ask()
    for line in iter_lines(source):
        if line_matches_limiter(line, terminator):
            break
        body.append(line)
        ask()
    return "".join(body)