"""Line source with comment stripping, indentation checks, and one-line lookahead."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from basicyaml.errors import TabIndentationError


@dataclass(frozen=True)
class SourceLine:
    """A comment-stripped input line together with its 1-based line number."""

    number: int
    text: str

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()


def strip_comment(text: str) -> str:
    """Cut ``text`` at the first ``#`` that is not preceded by a backslash."""
    start = 0
    while True:
        pos = text.find("#", start)
        if pos < 0:
            return text
        if pos == 0 or text[pos - 1] != "\\":
            return text[:pos]
        start = pos + 1


def measure_indent(text: str, line_number: int) -> int:
    """Count leading spaces; tabs are never valid indentation."""
    indent = 0
    for char in text:
        if char == " ":
            indent += 1
        elif char == "\t":
            raise TabIndentationError(
                "Tabs are not allowed in indentation", line=line_number, column=indent + 1
            )
        else:
            break
    return indent


class LineReader:
    """
    Iterate over source lines while allowing a single line to be put back.

    The parser needs to look one line ahead after an empty-valued key, and the
    block scalar reader must return the line that ended the block. Both go through
    :meth:`push_back`, so the underlying iterator never needs to be seekable.
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines: Iterator[str] = iter(lines)
        self._number = 0
        self._pending: SourceLine | None = None

    def __iter__(self) -> Iterator[SourceLine]:
        return self

    def __next__(self) -> SourceLine:
        line = self.next_line()
        if line is None:
            raise StopIteration
        return line

    def next_line(self) -> SourceLine | None:
        if self._pending is not None:
            line, self._pending = self._pending, None
            return line
        try:
            raw = next(self._lines)
        except StopIteration:
            return None
        self._number += 1
        raw = raw.rstrip("\n")
        if raw.endswith("\r"):
            raw = raw[:-1]
        return SourceLine(self._number, strip_comment(raw))

    def push_back(self, line: SourceLine) -> None:
        if self._pending is not None:
            raise RuntimeError("LineReader holds at most one pushed-back line")
        self._pending = line

    def peek_content(self) -> SourceLine | None:
        """
        Return the next non-blank line without consuming it.

        Blank lines met on the way are dropped; the caller skips them anyway.
        """
        while True:
            line = self.next_line()
            if line is None:
                return None
            if not line.is_blank:
                self.push_back(line)
                return line
