from __future__ import annotations

import pytest

from basicyaml.errors import InvalidFlowError
from basicyaml.flow import parse_flow, parse_flow_mapping, parse_flow_sequence
from basicyaml.nodes import Mapping, Scalar, ScalarStyle, Sequence


def test_flow_sequence_items_are_plain_scalars() -> None:
    seq = parse_flow_sequence("85, 92.5, 78")
    assert [item.value for item in seq.items] == ["85", "92.5", "78"]
    assert all(isinstance(item, Scalar) and item.style is ScalarStyle.PLAIN for item in seq.items)


def test_flow_sequence_drops_empty_elements() -> None:
    seq = parse_flow_sequence("a,, b ,")
    assert [item.value for item in seq.items] == ["a", "b"]


def test_flow_sequence_unquotes_elements() -> None:
    seq = parse_flow_sequence("'one', \"tab\\there\", \"\"")
    assert [item.value for item in seq.items] == ["one", "tab\there", ""]


def test_flow_mapping_pairs() -> None:
    mapping = parse_flow_mapping("debug: true, level: 1, name: 'test'")
    assert list(mapping.entries) == ["debug", "level", "name"]
    assert mapping.entries["name"] == Scalar("test")
    assert mapping.entries["level"] == Scalar("1")


def test_flow_mapping_splits_on_first_colon() -> None:
    mapping = parse_flow_mapping("url: http://example.com")
    assert mapping.entries["url"].value == "http://example.com"


def test_flow_mapping_missing_colon() -> None:
    with pytest.raises(InvalidFlowError) as excinfo:
        parse_flow_mapping("a: 1, b", line=7)
    assert excinfo.value.line == 7
    assert "missing colon" in str(excinfo.value)


def test_flow_mapping_empty_key() -> None:
    with pytest.raises(InvalidFlowError):
        parse_flow_mapping(": 1")


def test_parse_flow_dispatch() -> None:
    assert parse_flow("[]") == Sequence()
    assert parse_flow("{}") == Mapping()
    assert isinstance(parse_flow("[a, b]"), Sequence)
    assert isinstance(parse_flow("{a: b}"), Mapping)
    assert parse_flow("[unterminated") is None
    assert parse_flow("plain") is None
