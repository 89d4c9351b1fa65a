"""Serialization of trees back to indentation-based text."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from basicyaml.config import EmitterOptions
from basicyaml.document import Document
from basicyaml.errors import YamlError
from basicyaml.nodes import Mapping, Node, Scalar, ScalarStyle, Sequence

LOG = logging.getLogger(__name__)

_QUOTE_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "#": "\\#",
}
# First characters that would be read back as something other than plain text.
_SPECIAL_START = frozenset("|>[{'\"")
_FLOW_UNSAFE = frozenset(",\n#")


def serialize(tree: Document | Node, options: EmitterOptions | None = None) -> str:
    """
    Render a document or node as text.

    Collections of at most ``options.flow_threshold`` plain scalars are written in
    one-line flow form, everything else as indented blocks. Key order, scalar
    style, and flow-versus-block choice are not guaranteed to survive a round
    trip; scalar values are.
    """
    node = tree.root if isinstance(tree, Document) else tree
    lines = _Emitter(options or EmitterOptions()).emit(node)
    LOG.debug("Serialized %s into %d lines", type(node).__name__, len(lines))
    return "".join(f"{line}\n" for line in lines)


def quote(value: str) -> str:
    """Double-quote ``value`` using escapes the parser resolves."""
    return '"' + "".join(_QUOTE_ESCAPES.get(char, char) for char in value) + '"'


def format_scalar(value: str, in_sequence: bool = False) -> str:
    if (
        not value
        or value != value.strip()
        or value[0] in _SPECIAL_START
        or ": " in value
        or (in_sequence and ":" in value)
        or any(char in value for char in "\n\t#")
    ):
        return quote(value)
    return value


def format_key(key: str) -> str:
    # Lines are split on their first colon before the key is unquoted.
    if ":" in key:
        raise YamlError(f"Mapping key {key!r} contains a colon and cannot be written")
    if not key or key != key.strip() or key[0] in "-'\"" or any(char in key for char in "\n\t#"):
        return quote(key)
    return key


def _format_flow_scalar(value: str) -> str:
    if not value or value != value.strip() or value[0] in "'\"":
        return quote(value)
    return value


def _flow_safe(text: str, is_key: bool = False) -> bool:
    if any(char in _FLOW_UNSAFE for char in text):
        return False
    return not (is_key and (":" in text or not text.strip()))


class _Emitter:
    def __init__(self, options: EmitterOptions) -> None:
        self.options = options

    def emit(self, node: Node) -> list[str]:
        if isinstance(node, Mapping):
            return self._block_mapping(node, 0)
        if isinstance(node, Sequence):
            return self._block_sequence(node, 0) if node.items else ["[]"]
        return [format_scalar(node.value)]

    def _pad(self, level: int) -> str:
        return " " * (self.options.indent * level)

    def _entries(self, mapping: Mapping) -> Iterable[tuple[str, Node]]:
        if self.options.sort_keys:
            return sorted(mapping.entries.items())
        return mapping.entries.items()

    def _block_mapping(self, mapping: Mapping, level: int) -> list[str]:
        lines: list[str] = []
        for key, child in self._entries(mapping):
            head = f"{self._pad(level)}{format_key(key)}:"
            lines.extend(self._entry(head, child, level, in_sequence=False))
        return lines

    def _block_sequence(self, sequence: Sequence, level: int) -> list[str]:
        lines: list[str] = []
        for item in sequence.items:
            lines.extend(self._entry(f"{self._pad(level)}-", item, level, in_sequence=True))
        return lines

    def _entry(self, head: str, child: Node, level: int, in_sequence: bool) -> list[str]:
        if isinstance(child, Scalar):
            if not in_sequence:
                block = self._block_scalar(child, level + 1)
                if block is not None:
                    return [f"{head} {block[0]}", *block[1:]]
            return [f"{head} {format_scalar(child.value, in_sequence)}"]

        flow = self._flow(child)
        if flow is not None:
            return [f"{head} {flow}"]
        if isinstance(child, Mapping):
            return [head, *self._block_mapping(child, level + 1)]
        return [head, *self._block_sequence(child, level + 1)]

    def _flow(self, node: Mapping | Sequence) -> str | None:
        if isinstance(node, Mapping):
            if not node.entries:
                return "{}"
            pairs = list(self._entries(node))
            if len(pairs) > self.options.flow_threshold:
                return None
            if not all(
                _plain_scalar(value) and _flow_safe(value.value) and _flow_safe(key, is_key=True)
                for key, value in pairs
            ):
                return None
            body = ", ".join(
                f"{_format_flow_scalar(key)}: {_format_flow_scalar(value.value)}"
                for key, value in pairs
                if isinstance(value, Scalar)
            )
            return "{" + body + "}"

        if not node.items:
            return "[]"
        if len(node.items) > self.options.flow_threshold:
            return None
        if not all(_plain_scalar(item) and _flow_safe(item.value) for item in node.items):
            return None
        return "[" + ", ".join(_format_flow_scalar(item.value) for item in node.items if isinstance(item, Scalar)) + "]"

    def _block_scalar(self, scalar: Scalar, level: int) -> list[str] | None:
        """Return ``[header, *content lines]`` for a multi-line literal or folded scalar."""
        if scalar.style is ScalarStyle.PLAIN or "\n" not in scalar.value:
            return None
        body = scalar.value.rstrip("\n")
        trailing = len(scalar.value) - len(body)
        chomp = "-" if trailing == 0 else "" if trailing == 1 else "+"
        extra_blank = [""] * max(trailing - 1, 0)

        indicator = "|"
        lines = body.split("\n")
        if scalar.style is ScalarStyle.FOLDED and _foldable(lines):
            indicator = ">"
            paragraphs = lines
            lines = []
            for paragraph in paragraphs:
                if lines:
                    lines.append("")
                lines.append(paragraph)
        elif not _literal_safe(lines):
            return None

        pad = self._pad(level)
        content = [f"{pad}{line}" if line else "" for line in lines + extra_blank]
        return [f"{indicator}{chomp}", *content]


def _plain_scalar(node: Node) -> bool:
    return isinstance(node, Scalar) and node.style is ScalarStyle.PLAIN


def _literal_safe(lines: list[str]) -> bool:
    if not lines or not lines[0] or lines[0][0] in " \t":
        return False
    for line in lines:
        if "#" in line or line.lstrip(" ").startswith("\t"):
            return False
        if line and not line.strip():
            return False
    return True


def _foldable(lines: list[str]) -> bool:
    return all(line and line == line.strip() and "#" not in line for line in lines)
