"""Debug pretty-printing of parsed trees."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from basicyaml.nodes import Mapping, Node, Scalar, ScalarStyle, Sequence
from basicyaml.scalars import ScalarKind, classify

_KIND_STYLES = {
    ScalarKind.NULL: "dim",
    ScalarKind.BOOL: "yellow",
    ScalarKind.INT: "magenta",
    ScalarKind.FLOAT: "magenta",
    ScalarKind.STRING: "green",
}
_BLOCK_MARKERS = {ScalarStyle.LITERAL: "|", ScalarStyle.FOLDED: ">"}


def build_tree(node: Node, label: str = "root") -> Tree:
    """Return a rich Tree mirroring ``node``."""
    tree = Tree(_label(label, node))
    _add_children(tree, node)
    return tree


def print_tree(node: Node, label: str = "root", console: Console | None = None) -> None:
    (console or Console()).print(build_tree(node, label))


def _add_children(branch: Tree, node: Node) -> None:
    if isinstance(node, Mapping):
        for key, child in node.entries.items():
            _add_children(branch.add(_label(key, child)), child)
    elif isinstance(node, Sequence):
        for index, item in enumerate(node.items):
            _add_children(branch.add(_label(f"[{index}]", item)), item)


def _label(name: str, node: Node) -> Text:
    text = Text(name, style="bold cyan")
    if isinstance(node, Mapping):
        text.append(f" {{{len(node)}}}", style="blue")
    elif isinstance(node, Sequence):
        text.append(f" [{len(node)}]", style="blue")
    elif isinstance(node, Scalar):
        text.append(": ")
        marker = _BLOCK_MARKERS.get(node.style)
        if marker is not None:
            text.append(f"{marker} ", style="bold")
            text.append(repr(node.value), style="green")
        else:
            text.append(node.value or "~", style=_KIND_STYLES[classify(node.value)])
    return text
