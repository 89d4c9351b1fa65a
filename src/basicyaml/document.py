"""Documents and the string/stream/file loading entry points."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TextIO, TypeVar

from basicyaml.convert import to_python
from basicyaml.errors import FileError
from basicyaml.nodes import Mapping
from basicyaml.parser import parse, parse_stream
from basicyaml.view import NodeView

LOG = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class Document:
    """Owner of a parsed tree; the root is always a mapping."""

    root: Mapping = field(default_factory=Mapping)
    source: Path | None = None

    def view(self) -> NodeView:
        return NodeView(self.root)

    def __getitem__(self, key: str | int) -> NodeView:
        return self.view()[key]

    def at_path(self, path: str) -> NodeView:
        return self.view().at_path(path)

    def value(self, path: str, default: T) -> T:
        return self.view().value(path, default)

    def get(self, path: str, default: Any = None) -> Any:
        return self.view().get(path, default)

    def to_python(self) -> dict[str, Any]:
        return to_python(self.root)


def load_string(text: str) -> Document:
    return Document(parse(text))


def load_stream(stream: TextIO | Iterable[str]) -> Document:
    return Document(parse_stream(stream))


def load_file(path: Path | str, encoding: str = "utf-8") -> Document:
    """Parse the file at ``path``; open and decode failures raise :class:`FileError`."""
    path_obj = Path(path)
    try:
        with path_obj.open("r", encoding=encoding) as handle:
            root = parse_stream(handle)
    except OSError as exc:
        raise FileError(path_obj, exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise FileError(path_obj, f"not valid {encoding} text") from exc
    LOG.debug("Loaded %s", path_obj)
    return Document(root, source=path_obj)
