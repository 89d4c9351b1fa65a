"""Bridges between parsed trees and plain Python data."""

from __future__ import annotations

from typing import Any

from basicyaml.nodes import Mapping, Node, Scalar, ScalarStyle, Sequence
from basicyaml.scalars import deduce


def to_python(node: Node) -> Any:
    """
    Convert a tree to dicts, lists, and typed scalars.

    Plain scalars go through the scalar classifier; literal and folded scalars
    are always strings.
    """
    if isinstance(node, Mapping):
        return {key: to_python(child) for key, child in node.entries.items()}
    if isinstance(node, Sequence):
        return [to_python(item) for item in node.items]
    if node.style is not ScalarStyle.PLAIN:
        return node.value
    return deduce(node.value)


def from_python(data: Any) -> Node:
    """Build a tree from dicts, lists, tuples, strings, numbers, booleans, and None."""
    if isinstance(data, (Mapping, Sequence, Scalar)):
        return data
    if isinstance(data, dict):
        return Mapping({str(key): from_python(value) for key, value in data.items()})
    if isinstance(data, (list, tuple)):
        return Sequence([from_python(item) for item in data])
    if data is None:
        return Scalar("null")
    if isinstance(data, bool):
        return Scalar("true" if data else "false")
    if isinstance(data, (int, float)):
        return Scalar(repr(data))
    if isinstance(data, str):
        if "\n" in data:
            return Scalar(data, ScalarStyle.LITERAL)
        return Scalar(data)
    raise TypeError(f"Cannot represent {type(data).__name__} as a YAML node")
