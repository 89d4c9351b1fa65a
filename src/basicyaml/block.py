"""Block scalar reading (``|`` and ``>``), folding, and chomping."""

from __future__ import annotations

import logging
from enum import Enum

from basicyaml.errors import StructureError
from basicyaml.lines import LineReader, measure_indent
from basicyaml.nodes import Scalar, ScalarStyle

LOG = logging.getLogger(__name__)

BLOCK_INDICATORS = {"|": ScalarStyle.LITERAL, ">": ScalarStyle.FOLDED}


class Chomp(str, Enum):
    """Trailing newline handling for block scalars."""

    STRIP = "-"
    CLIP = ""
    KEEP = "+"


def is_block_header(value: str) -> bool:
    return bool(value) and value[0] in BLOCK_INDICATORS


def parse_block_header(value: str) -> tuple[ScalarStyle, Chomp]:
    """Split a ``|``/``>`` header into its style and chomp indicator."""
    style = BLOCK_INDICATORS[value[0]]
    chomp = Chomp.CLIP
    if len(value) > 1 and value[1] in "-+":
        chomp = Chomp(value[1])
    return style, chomp


def read_block_lines(reader: LineReader, header_indent: int, header_line: int) -> str:
    """
    Consume the lines of a block scalar and return them newline-terminated.

    A line belongs to the block while it is indented deeper than the header line.
    The first content line fixes the block indentation; deeper lines keep their
    extra leading spaces. Blank lines before the first content line are dropped,
    blank lines after it are kept so chomping can decide on them. The line that
    ends the block is pushed back onto ``reader``.
    """
    captured: list[str] = []
    block_indent: int | None = None
    for line in reader:
        if line.is_blank:
            if block_indent is not None:
                captured.append("")
            continue
        indent = measure_indent(line.text, line.number)
        if indent <= header_indent:
            reader.push_back(line)
            break
        if block_indent is None:
            block_indent = indent
        captured.append(line.text[min(indent, block_indent):])

    if block_indent is None:
        raise StructureError("Block scalar has no indented content", line=header_line)
    LOG.debug("Block scalar at line %d captured %d lines", header_line, len(captured))
    return "".join(f"{text}\n" for text in captured)


def apply_chomp(content: str, chomp: Chomp) -> str:
    if not content:
        return content
    base = content.rstrip("\n")
    if not base:
        return ""
    if chomp is Chomp.STRIP:
        return base
    if chomp is Chomp.KEEP:
        return content
    return base + "\n"


def fold_block(content: str) -> str:
    """
    Fold block scalar content: join lines with spaces, turn blank runs into one newline.

    The trailing newline run is left untouched for :func:`apply_chomp`.
    """
    body = content.rstrip("\n")
    trailing = content[len(body):]
    pieces: list[str] = []
    paragraph_break = False
    for line in body.split("\n"):
        if not line.strip():
            paragraph_break = True
            continue
        if pieces:
            pieces.append("\n" if paragraph_break else " ")
        pieces.append(line.rstrip())
        paragraph_break = False
    return "".join(pieces) + trailing


def read_block_scalar(reader: LineReader, header: str, header_indent: int, header_line: int) -> Scalar:
    """Read the block introduced by ``header`` and return the finished scalar node."""
    style, chomp = parse_block_header(header)
    content = read_block_lines(reader, header_indent, header_line)
    if style is ScalarStyle.FOLDED:
        content = fold_block(content)
    return Scalar(apply_chomp(content, chomp), style)
