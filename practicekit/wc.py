"""Line, word and byte counts of a text file."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Union


@dataclass(frozen=True)
class Counts:
    """Totals for a body of text; ``chars`` counts UTF-8 bytes, excluding line ends."""

    lines: int = 0
    words: int = 0
    chars: int = 0


def _strip_line_end(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def count(lines: Iterable[Union[str, bytes]]) -> Counts:
    """Count lines, whitespace-separated words and bytes; trailing line ends are ignored."""
    n_lines = n_words = n_chars = 0
    for raw in lines:
        text = raw.decode("utf-8", "surrogateescape") if isinstance(raw, bytes) else raw
        text = _strip_line_end(text)
        n_lines += 1
        n_words += len(text.split())
        n_chars += len(text.encode("utf-8", "surrogateescape"))
    return Counts(n_lines, n_words, n_chars)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print ``lines words chars filename`` for the named file."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Usage: wc <filename>")
        return 0
    path = args[0]
    try:
        with open(path, "rb") as handle:
            totals = count(handle)
    except OSError as error:
        print("Error:", error)
        return 0
    print(f"{totals.lines} {totals.words} {totals.chars} {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())