"""
basicyaml package initialisation.

Exposes the public API for parsing a small, indentation-based YAML subset into
a tree of scalars, sequences, and mappings, and for writing such trees back out.
"""

from importlib import metadata

from basicyaml.convert import from_python, to_python
from basicyaml.document import Document, load_file, load_stream, load_string
from basicyaml.emitter import serialize
from basicyaml.errors import (
    AmbiguousColonError,
    EmptyKeyError,
    FileError,
    InvalidFlowError,
    MissingColonError,
    NodeTypeError,
    StructureError,
    TabIndentationError,
    UnexpectedIndentationError,
    YamlError,
)
from basicyaml.nodes import Mapping, Node, Scalar, ScalarStyle, Sequence
from basicyaml.parser import parse, parse_stream
from basicyaml.scalars import ScalarKind, classify, deduce, to_bool, to_double, to_float, to_int
from basicyaml.view import NodeView


def get_version() -> str:
    """Return the installed package version, falling back to source version during development."""
    try:
        return metadata.version("basicyaml")
    except metadata.PackageNotFoundError:  # pragma: no cover - only occurs during dev
        return "0.1.0"


__all__ = [
    "AmbiguousColonError",
    "Document",
    "EmptyKeyError",
    "FileError",
    "InvalidFlowError",
    "Mapping",
    "MissingColonError",
    "Node",
    "NodeTypeError",
    "NodeView",
    "Scalar",
    "ScalarKind",
    "ScalarStyle",
    "Sequence",
    "StructureError",
    "TabIndentationError",
    "UnexpectedIndentationError",
    "YamlError",
    "classify",
    "deduce",
    "from_python",
    "get_version",
    "load_file",
    "load_stream",
    "load_string",
    "parse",
    "parse_stream",
    "serialize",
    "to_bool",
    "to_double",
    "to_float",
    "to_int",
    "to_python",
]
