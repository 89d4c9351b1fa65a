"""Error types raised while parsing, loading, or reading YAML trees."""

from __future__ import annotations

from pathlib import Path


class YamlError(ValueError):
    """Base class for every failure raised by basicyaml, optionally positioned."""

    def __init__(self, message: str, line: int | None = None, column: int | None = None) -> None:
        self.message = message
        self.line = line
        self.column = column
        super().__init__(self._render())

    def _render(self) -> str:
        if self.line is None:
            return self.message
        if self.column is None:
            return f"{self.message} (line {self.line})"
        return f"{self.message} (line {self.line}, column {self.column})"


class TabIndentationError(YamlError):
    """Raised when a tab character appears in leading whitespace."""


class StructureError(YamlError):
    """Raised on an impossible frame stack or a block scalar without content."""


class UnexpectedIndentationError(YamlError):
    """Raised when indented content follows a plain scalar value."""


class MissingColonError(YamlError):
    """Raised when a mapping line has no colon and nothing to continue."""


class EmptyKeyError(YamlError):
    """Raised when a mapping key trims to an empty string."""


class AmbiguousColonError(YamlError):
    """Raised when an unquoted scalar value contains ``': '``."""


class InvalidFlowError(YamlError):
    """Raised when a flow mapping element lacks a colon or a key."""


class NodeTypeError(YamlError, TypeError):
    """Raised by throwing accessors when a node is not of the requested variant."""


class FileError(YamlError):
    """Raised when a YAML source file cannot be opened or decoded."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"Cannot open file {self.path}: {reason}")


__all__ = [
    "AmbiguousColonError",
    "EmptyKeyError",
    "FileError",
    "InvalidFlowError",
    "MissingColonError",
    "NodeTypeError",
    "StructureError",
    "TabIndentationError",
    "UnexpectedIndentationError",
    "YamlError",
]
