from __future__ import annotations

import pytest

from basicyaml.nodes import Mapping, Scalar, Sequence
from basicyaml.scalars import (
    ScalarKind,
    classify,
    deduce,
    strip_quotes,
    to_bool,
    to_double,
    to_float,
    to_int,
    unescape,
)


@pytest.mark.parametrize(
    ("text", "kind"),
    [
        ("123", ScalarKind.INT),
        ("-7", ScalarKind.INT),
        ("+7", ScalarKind.INT),
        ("0", ScalarKind.INT),
        ("3.14", ScalarKind.FLOAT),
        ("1e3", ScalarKind.FLOAT),
        ("True", ScalarKind.BOOL),
        ("off", ScalarKind.BOOL),
        ("null", ScalarKind.NULL),
        ("~", ScalarKind.NULL),
        ("", ScalarKind.NULL),
        ("hello", ScalarKind.STRING),
        ("1_000", ScalarKind.STRING),
    ],
)
def test_classify(text: str, kind: ScalarKind) -> None:
    assert classify(text) is kind


def test_deduce_returns_python_values() -> None:
    assert deduce("42") == 42
    assert isinstance(deduce("42"), int)
    assert deduce("2.5") == 2.5
    assert deduce("Yes") is True
    assert deduce("NULL") is None
    assert deduce("plain text") == "plain text"


@pytest.mark.parametrize("text", ["null", "Null", "~", ""])
def test_typed_accessors_absent_for_null_like(text: str) -> None:
    node = Scalar(text)
    assert to_int(node) is None
    assert to_bool(node) is None
    assert to_float(node) is None


@pytest.mark.parametrize("text", ["true", "TRUE", "Yes", "oN"])
def test_to_bool_true_words(text: str) -> None:
    assert to_bool(Scalar(text)) is True


@pytest.mark.parametrize("text", ["false", "FALSE", "no", "Off"])
def test_to_bool_false_words(text: str) -> None:
    assert to_bool(Scalar(text)) is False


def test_to_bool_rejects_numbers() -> None:
    assert to_bool(Scalar("1")) is None
    assert to_bool(Scalar("0")) is None


def test_to_int_is_lossless() -> None:
    assert to_int(Scalar("85")) == 85
    assert to_int(Scalar("3.5")) is None
    assert to_int(Scalar(" 5")) is None
    assert to_int(Scalar("12abc")) is None


def test_to_float_accepts_integers_and_rejects_junk() -> None:
    assert to_float(Scalar("85")) == 85.0
    assert to_double(Scalar("92.5")) == 92.5
    assert to_float(Scalar("1_000")) is None
    assert to_float(Scalar("abc")) is None


def test_typed_accessors_on_collections_are_absent() -> None:
    assert to_int(Mapping()) is None
    assert to_bool(Sequence()) is None
    assert to_float(None) is None


def test_unescape() -> None:
    assert unescape("Line one\\nLine two") == "Line one\nLine two"
    assert unescape("tab\\there") == "tab\there"
    assert unescape("It\\'s") == "It's"
    assert unescape('say \\"hi\\"') == 'say "hi"'
    assert unescape("back\\\\slash") == "back\\slash"
    assert unescape("\\q") == "q"
    assert unescape("dangling\\") == "dangling\\"


def test_strip_quotes() -> None:
    assert strip_quotes('"hello: world"') == ("hello: world", True)
    assert strip_quotes("'single'") == ("single", True)
    assert strip_quotes("\"mismatched'") == ("\"mismatched'", False)
    assert strip_quotes('"') == ('"', False)
    assert strip_quotes("plain") == ("plain", False)
