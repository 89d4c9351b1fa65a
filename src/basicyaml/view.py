"""Read-only, non-raising navigation over a parsed tree."""

from __future__ import annotations

import re
from collections.abc import Iterator
from typing import Any, TypeVar

from basicyaml.convert import to_python
from basicyaml.errors import NodeTypeError
from basicyaml.nodes import Mapping, Node, Scalar, Sequence, as_mapping, as_sequence, as_str
from basicyaml.scalars import to_bool, to_float, to_int

T = TypeVar("T")

_SEGMENT_RE = re.compile(r"([^.\[\]]*)((?:\[\d+\])*)")
_INDEX_RE = re.compile(r"\[(\d+)\]")


class NodeView:
    """
    Lightweight handle on a node that may be absent.

    Subscripts and path lookups return an absent view instead of raising, so
    chains like ``view["a"]["b"][0]`` are always safe. A view does not own its
    node and reflects the tree as it was when the view was taken.
    """

    __slots__ = ("node",)

    def __init__(self, node: Node | None = None) -> None:
        self.node = node

    def __bool__(self) -> bool:
        return self.node is not None

    def __repr__(self) -> str:
        return f"NodeView({self.node!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, NodeView):
            return self.node == other.node
        return NotImplemented

    def is_scalar(self) -> bool:
        return isinstance(self.node, Scalar)

    def is_mapping(self) -> bool:
        return isinstance(self.node, Mapping)

    def is_sequence(self) -> bool:
        return isinstance(self.node, Sequence)

    def as_str(self) -> str:
        return as_str(self._require())

    def as_mapping(self) -> dict[str, Node]:
        return as_mapping(self._require())

    def as_sequence(self) -> list[Node]:
        return as_sequence(self._require())

    def to_int(self) -> int | None:
        return to_int(self.node)

    def to_float(self) -> float | None:
        return to_float(self.node)

    to_double = to_float

    def to_bool(self) -> bool | None:
        return to_bool(self.node)

    def to_python(self) -> Any:
        return None if self.node is None else to_python(self.node)

    def __len__(self) -> int:
        if isinstance(self.node, (Mapping, Sequence)):
            return len(self.node)
        return 0

    def __iter__(self) -> Iterator[NodeView]:
        if isinstance(self.node, Sequence):
            return (NodeView(item) for item in self.node.items)
        if isinstance(self.node, Mapping):
            return (NodeView(child) for child in self.node.entries.values())
        return iter(())

    def keys(self) -> list[str]:
        if isinstance(self.node, Mapping):
            return list(self.node.entries)
        return []

    def __getitem__(self, key: str | int) -> NodeView:
        node = self.node
        if isinstance(key, int) and not isinstance(key, bool):
            if isinstance(node, Sequence) and 0 <= key < len(node.items):
                return NodeView(node.items[key])
            return NodeView()
        if isinstance(node, Mapping):
            return NodeView(node.entries.get(key))
        return NodeView()

    def at_path(self, path: str) -> NodeView:
        """
        Follow a dotted path with bracketed indices, e.g. ``servers[1].host``.

        Resolution stops at the first missing segment and returns an absent view.
        Malformed paths also resolve to an absent view.
        """
        current = self
        for segment in path.split("."):
            if not segment:
                continue
            match = _SEGMENT_RE.fullmatch(segment)
            if match is None:
                return NodeView()
            name, indices = match.groups()
            if name:
                current = current[name]
                if not current:
                    return current
            for index in _INDEX_RE.findall(indices):
                current = current[int(index)]
                if not current:
                    return current
        return current

    def value(self, path: str, default: T) -> T:
        """
        Read ``path`` converted to the type of ``default``.

        Returns ``default`` when the path is absent or the node does not convert.
        """
        found = self.at_path(path)
        if not found:
            return default
        result: Any
        if isinstance(default, bool):
            result = found.to_bool()
        elif isinstance(default, int):
            result = found.to_int()
        elif isinstance(default, float):
            result = found.to_float()
        elif isinstance(default, str):
            result = found.node.value if isinstance(found.node, Scalar) else None
        else:
            result = found.to_python()
        return default if result is None else result

    def get(self, path: str, default: Any = None) -> Any:
        """Return the Python value at ``path`` (see :func:`~basicyaml.convert.to_python`)."""
        found = self.at_path(path)
        if not found:
            return default
        return found.to_python()

    def _require(self) -> Node:
        if self.node is None:
            raise NodeTypeError("node is absent")
        return self.node
