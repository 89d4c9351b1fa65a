"""
Indentation-driven parser producing a :class:`~basicyaml.nodes.Mapping` tree.

The parser is a line-at-a-time state machine over an explicit stack of frames.
Each frame marks the collection that receives children while lines stay
indented deeper than the frame's indentation. Block scalars and flow
collections are handed off to :mod:`basicyaml.block` and :mod:`basicyaml.flow`.
Scalars keep their raw text; typing happens later in :mod:`basicyaml.scalars`.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TextIO, Union, cast

from basicyaml.block import is_block_header, read_block_scalar
from basicyaml.errors import (
    AmbiguousColonError,
    EmptyKeyError,
    MissingColonError,
    StructureError,
    UnexpectedIndentationError,
)
from basicyaml.flow import parse_flow
from basicyaml.lines import LineReader, SourceLine, measure_indent
from basicyaml.nodes import Mapping, Scalar, Sequence, kind_name
from basicyaml.scalars import strip_quotes

LOG = logging.getLogger(__name__)

Collection = Union[Sequence, Mapping]


@dataclass
class Frame:
    """Insertion point for lines indented deeper than ``indent``."""

    node: Collection
    indent: int
    replace: Callable[[Collection], None] | None = None


@dataclass
class _Continuation:
    """
    The last scalar value written on a line.

    Deeper lines may never nest under it. Colon-less follow-up lines extend it
    only when it is a plain scalar (``extendable``).
    """

    scalar: Scalar
    line_indent: int
    owner_indent: int
    extendable: bool = True


def _mapping_slot(mapping: Mapping, key: str) -> Callable[[Collection], None]:
    def replace(node: Collection) -> None:
        mapping.entries[key] = node

    return replace


def _sequence_slot(sequence: Sequence, index: int) -> Callable[[Collection], None]:
    def replace(node: Collection) -> None:
        sequence.items[index] = node

    return replace


class _Parser:
    def __init__(self, reader: LineReader) -> None:
        self.reader = reader
        self.root = Mapping()
        self.stack: list[Frame] = [Frame(self.root, -1)]
        self.continuation: _Continuation | None = None

    def run(self) -> Mapping:
        for line in self.reader:
            if line.is_blank:
                continue
            self._process(line)
        return self.root

    def _process(self, line: SourceLine) -> None:
        indent = measure_indent(line.text, line.number)
        content = line.text[indent:].strip()

        while len(self.stack) > 1 and indent <= self.stack[-1].indent:
            popped = self.stack.pop()
            LOG.debug("Line %d: closed %s frame at indent %d", line.number, kind_name(popped.node), popped.indent)
        if not self.stack:
            raise StructureError(f"Invalid indentation or structure near: {content}", line=line.number)
        frame = self.stack[-1]

        pending = self.continuation
        if pending is not None and indent > pending.line_indent:
            if not pending.extendable or content.startswith("-") or ":" in content:
                raise UnexpectedIndentationError(
                    f"Unexpected indentation after scalar value: {content}", line=line.number
                )
            pending.scalar.value += "\n" + content
            return

        if content.startswith("-"):
            self._sequence_item(frame, content, indent, line)
        else:
            self._mapping_entry(frame, content, indent, line)

    def _coerce(self, frame: Frame, kind: type[Collection], line: SourceLine) -> Collection:
        node = frame.node
        if isinstance(node, kind):
            return node
        wanted = "sequence" if kind is Sequence else "mapping"
        if len(node) > 0:
            raise StructureError(
                f"Cannot turn a {kind_name(node)} with existing children into a {wanted}",
                line=line.number,
            )
        if frame.replace is None:
            raise StructureError(f"The document root must be a mapping, not a {wanted}", line=line.number)
        replacement = kind()
        frame.replace(replacement)
        frame.node = replacement
        return replacement

    def _sequence_item(self, frame: Frame, content: str, indent: int, line: SourceLine) -> None:
        sequence = cast(Sequence, self._coerce(frame, Sequence, line))
        self.continuation = None
        text = content[1:].strip()
        index = len(sequence.items)

        if not text:
            item = Mapping()
            sequence.items.append(item)
            self.stack.append(Frame(item, indent, _sequence_slot(sequence, index)))
            LOG.debug("Line %d: opened sequence item frame at indent %d", line.number, indent)
            return

        unquoted, was_quoted = strip_quotes(text)
        if was_quoted:
            scalar = Scalar(unquoted)
            sequence.items.append(scalar)
            self.continuation = _Continuation(scalar, indent, frame.indent, extendable=False)
            return

        flow = parse_flow(text, line.number)
        if flow is not None:
            sequence.items.append(flow)
            return

        if ":" in text:
            # Only the inline pair is captured; deeper keys are not merged into this item.
            key, _, value = text.partition(":")
            key = self._key(key, content, line)
            value = value.strip()
            nested = parse_flow(value, line.number)
            if nested is not None:
                sequence.items.append(Mapping({key: nested}))
                return
            scalar, was_quoted = self._inline_scalar(value, line)
            sequence.items.append(Mapping({key: scalar}))
            if scalar.value or was_quoted:
                self.continuation = _Continuation(scalar, indent, frame.indent, extendable=not was_quoted)
            return

        scalar = Scalar(text)
        sequence.items.append(scalar)
        self.continuation = _Continuation(scalar, indent, frame.indent)

    def _mapping_entry(self, frame: Frame, content: str, indent: int, line: SourceLine) -> None:
        key, colon, value = content.partition(":")
        if not colon:
            pending = self.continuation
            if pending is not None and pending.extendable and indent > pending.owner_indent:
                pending.scalar.value += "\n" + content
                return
            raise MissingColonError(f"Invalid mapping format (missing colon): {content}", line=line.number)

        key = self._key(key, content, line)
        value = value.strip()
        mapping = cast(Mapping, self._coerce(frame, Mapping, line))
        self.continuation = None

        if not value:
            mapping.entries[key] = self._open_nested(mapping, key, indent, line)
            return

        if is_block_header(value):
            mapping.entries[key] = read_block_scalar(self.reader, value, indent, line.number)
            return

        unquoted, was_quoted = strip_quotes(value)
        if was_quoted:
            scalar = Scalar(unquoted)
            mapping.entries[key] = scalar
            self.continuation = _Continuation(scalar, indent, frame.indent, extendable=False)
            return

        flow = parse_flow(value, line.number)
        if flow is not None:
            mapping.entries[key] = flow
            return

        if ": " in value:
            raise AmbiguousColonError(
                f"Unquoted value contains ': ', use quotes to avoid ambiguity: {value}", line=line.number
            )
        scalar = Scalar(value)
        mapping.entries[key] = scalar
        self.continuation = _Continuation(scalar, indent, frame.indent)

    def _open_nested(self, mapping: Mapping, key: str, indent: int, line: SourceLine) -> Collection:
        upcoming = self.reader.peek_content()
        node: Collection = Mapping()
        if upcoming is not None and upcoming.text.strip().startswith("-"):
            node = Sequence()
        self.stack.append(Frame(node, indent, _mapping_slot(mapping, key)))
        LOG.debug("Line %d: opened %s frame for key %r at indent %d", line.number, kind_name(node), key, indent)
        return node

    @staticmethod
    def _key(raw: str, content: str, line: SourceLine) -> str:
        key = raw.strip()
        if not key:
            raise EmptyKeyError(f"Invalid mapping format (empty key): {content}", line=line.number)
        key, _ = strip_quotes(key)
        return key

    @staticmethod
    def _inline_scalar(value: str, line: SourceLine) -> tuple[Scalar, bool]:
        unquoted, was_quoted = strip_quotes(value)
        if was_quoted:
            return Scalar(unquoted), True
        if ": " in value:
            raise AmbiguousColonError(
                f"Unquoted value contains ': ', use quotes to avoid ambiguity: {value}", line=line.number
            )
        return Scalar(value), False


def parse_lines(lines: Iterable[str]) -> Mapping:
    """Parse an iterable of text lines and return the root mapping."""
    return _Parser(LineReader(lines)).run()


def parse_stream(stream: TextIO | Iterable[str]) -> Mapping:
    """Parse a text stream (any iterable of lines, such as an open file)."""
    return parse_lines(stream)


def parse(text: str) -> Mapping:
    """Parse YAML ``text`` and return the root mapping."""
    return parse_lines(io.StringIO(text))
