"""Tree model shared by the parser, the emitter, and the view layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from basicyaml.errors import NodeTypeError


class ScalarStyle(str, Enum):
    """How a scalar was written in the source text."""

    PLAIN = "plain"
    LITERAL = "literal"
    FOLDED = "folded"


@dataclass
class Scalar:
    """Raw scalar text; typing happens on demand in :mod:`basicyaml.scalars`."""

    value: str = ""
    style: ScalarStyle = ScalarStyle.PLAIN


@dataclass
class Sequence:
    """Ordered list of child nodes."""

    items: list[Node] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.items)


@dataclass
class Mapping:
    """String-keyed children in insertion order."""

    entries: dict[str, Node] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.entries)


Node = Union[Scalar, Sequence, Mapping]


def is_scalar(node: Node | None) -> bool:
    return isinstance(node, Scalar)


def is_sequence(node: Node | None) -> bool:
    return isinstance(node, Sequence)


def is_mapping(node: Node | None) -> bool:
    return isinstance(node, Mapping)


def as_str(node: Node) -> str:
    """Return the raw text of a scalar node."""
    if not isinstance(node, Scalar):
        raise NodeTypeError(f"node is not a scalar: {kind_name(node)}")
    return node.value


def as_sequence(node: Node) -> list[Node]:
    if not isinstance(node, Sequence):
        raise NodeTypeError(f"node is not a sequence: {kind_name(node)}")
    return node.items


def as_mapping(node: Node) -> dict[str, Node]:
    if not isinstance(node, Mapping):
        raise NodeTypeError(f"node is not a mapping: {kind_name(node)}")
    return node.entries


def kind_name(node: Node | None) -> str:
    if isinstance(node, Scalar):
        return "scalar"
    if isinstance(node, Sequence):
        return "sequence"
    if isinstance(node, Mapping):
        return "mapping"
    return "absent"
