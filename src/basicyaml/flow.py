"""One-line flow collections: ``[a, b]`` and ``{k: v}``."""

from __future__ import annotations

from basicyaml.errors import InvalidFlowError
from basicyaml.nodes import Mapping, Scalar, Sequence
from basicyaml.scalars import strip_quotes

# Elements are split on every comma; nested collections and quoted commas are
# not supported inside flow text.


def is_flow_sequence(value: str) -> bool:
    return len(value) >= 2 and value[0] == "[" and value[-1] == "]"


def is_flow_mapping(value: str) -> bool:
    return len(value) >= 2 and value[0] == "{" and value[-1] == "}"


def parse_flow_sequence(content: str, line: int | None = None) -> Sequence:
    """Parse the text between ``[`` and ``]``; empty elements are dropped."""
    items = []
    for raw in content.split(","):
        element = raw.strip()
        if not element:
            continue
        text, _ = strip_quotes(element)
        items.append(Scalar(text))
    return Sequence(items)


def parse_flow_mapping(content: str, line: int | None = None) -> Mapping:
    """Parse the text between ``{`` and ``}``."""
    mapping = Mapping()
    if not content.strip():
        return mapping
    for raw in content.split(","):
        if not raw.strip():
            continue
        key, colon, value = raw.partition(":")
        if not colon:
            raise InvalidFlowError(
                f"Invalid flow mapping pair (missing colon): {raw.strip()!r}", line=line
            )
        key = key.strip()
        if not key:
            raise InvalidFlowError("Empty key in flow mapping", line=line)
        key, _ = strip_quotes(key)
        text, _ = strip_quotes(value.strip())
        mapping.entries[key] = Scalar(text)
    return mapping


def parse_flow(value: str, line: int | None = None) -> Sequence | Mapping | None:
    """Parse ``value`` when it is bracket- or brace-delimited, otherwise return None."""
    if is_flow_sequence(value):
        return parse_flow_sequence(value[1:-1], line)
    if is_flow_mapping(value):
        return parse_flow_mapping(value[1:-1], line)
    return None
