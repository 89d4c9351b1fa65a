"""Scalar classification, typed accessors, and quoted-string unescaping."""

from __future__ import annotations

import re
from enum import Enum
from typing import Any

from basicyaml.nodes import Node, Scalar

TRUE_WORDS = frozenset({"true", "yes", "on"})
FALSE_WORDS = frozenset({"false", "no", "off"})

_INT_RE = re.compile(r"[+-]?[0-9]+\Z")

_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "\\": "\\",
    "'": "'",
    '"': '"',
}


class ScalarKind(str, Enum):
    NULL = "null"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STRING = "string"


def is_null_text(text: str) -> bool:
    return text == "" or text == "~" or text.lower() == "null"


def parse_int(text: str) -> int | None:
    if _INT_RE.match(text) is None:
        return None
    return int(text)


def parse_float(text: str) -> float | None:
    # float() tolerates surrounding whitespace and digit underscores; a token must not.
    if not text or text != text.strip() or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def parse_bool(text: str) -> bool | None:
    lowered = text.lower()
    if lowered in TRUE_WORDS:
        return True
    if lowered in FALSE_WORDS:
        return False
    return None


def classify(text: str) -> ScalarKind:
    """
    Classify raw scalar text.

    Order matters: integers win over floats, numbers win over booleans, and
    booleans win over null, so ``"0"`` is an integer and ``"off"`` is a boolean.
    """
    if parse_int(text) is not None:
        return ScalarKind.INT
    if parse_float(text) is not None:
        return ScalarKind.FLOAT
    if parse_bool(text) is not None:
        return ScalarKind.BOOL
    if is_null_text(text):
        return ScalarKind.NULL
    return ScalarKind.STRING


def deduce(text: str) -> Any:
    """Return the Python value for raw scalar text according to :func:`classify`."""
    kind = classify(text)
    if kind is ScalarKind.INT:
        return parse_int(text)
    if kind is ScalarKind.FLOAT:
        return parse_float(text)
    if kind is ScalarKind.BOOL:
        return parse_bool(text)
    if kind is ScalarKind.NULL:
        return None
    return text


def _scalar_text(node: Node | None) -> str | None:
    if not isinstance(node, Scalar) or is_null_text(node.value):
        return None
    return node.value


def to_int(node: Node | None) -> int | None:
    text = _scalar_text(node)
    return None if text is None else parse_int(text)


def to_float(node: Node | None) -> float | None:
    text = _scalar_text(node)
    return None if text is None else parse_float(text)


to_double = to_float


def to_bool(node: Node | None) -> bool | None:
    text = _scalar_text(node)
    return None if text is None else parse_bool(text)


def unescape(text: str) -> str:
    """Resolve backslash escapes found inside a quoted scalar."""
    if "\\" not in text:
        return text
    out: list[str] = []
    index = 0
    while index < len(text):
        char = text[index]
        if char == "\\" and index + 1 < len(text):
            index += 1
            escaped = text[index]
            out.append(_ESCAPES.get(escaped, escaped))
        else:
            out.append(char)
        index += 1
    return "".join(out)


def strip_quotes(text: str) -> tuple[str, bool]:
    """Return ``(content, was_quoted)`` for text wrapped in matching quotes."""
    if len(text) > 1 and text[0] in "\"'" and text[-1] == text[0]:
        return unescape(text[1:-1]), True
    return text, False
