from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
SRC_STR = str(SRC)
if SRC_STR not in sys.path:
    sys.path.insert(0, SRC_STR)


@pytest.fixture
def write_yaml(tmp_path: Path) -> Callable[..., Path]:
    """Write text to a file under tmp_path and return its path."""

    def _write(text: str, name: str = "document.yaml", encoding: str = "utf-8") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding=encoding)
        return path

    return _write
