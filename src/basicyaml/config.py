"""Configuration models and helpers for basicyaml."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

from basicyaml.convert import to_python
from basicyaml.document import load_file


class EmitterOptions(BaseModel):
    """Settings that control how trees are serialized back to text."""

    indent: int = Field(default=2, ge=1, le=8, description="Spaces per nesting level.")
    flow_threshold: int = Field(
        default=5,
        ge=0,
        le=64,
        description="Largest all-scalar collection written in one-line flow form; 0 disables flow.",
    )
    sort_keys: bool = Field(default=False, description="Emit mapping keys in sorted order.")


class Settings(BaseModel):
    """Top-level settings used by the command-line wrapper."""

    emitter: EmitterOptions = Field(default_factory=EmitterOptions)
    encoding: str = Field(default="utf-8", description="Encoding used to read source files.")
    log_level: str = Field(default="WARNING")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Accept any standard logging level name, case-insensitively."""
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{value}'")
        return level


def load_settings(
    config_path: Optional[Path] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> Settings:
    """
    Build Settings from an optional settings file and dotted overrides.

    The settings file is itself parsed with basicyaml. Override keys use dotted
    notation (e.g. ``emitter.indent=4``) and are applied after the file.
    """
    merged: Dict[str, Any] = Settings().model_dump()

    if config_path:
        file_conf = to_python(load_file(config_path).root)
        merged = _deep_merge(merged, file_conf)

    if overrides:
        for dotted_key, value in overrides.items():
            if value is None:
                continue
            _apply_override(merged, dotted_key, value)

    return Settings.model_validate(merged)


def _deep_merge(base: Dict[str, Any], extra: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in extra.items():
        if (
            key in base
            and isinstance(base[key], dict)
            and isinstance(value, dict)
        ):
            base[key] = _deep_merge(dict(base[key]), value)
        else:
            base[key] = value
    return base


def _apply_override(target: Dict[str, Any], dotted_key: str, value: Any) -> None:
    parts = dotted_key.split(".")
    current = target
    for part in parts[:-1]:
        current = current.setdefault(part, {})
    current[parts[-1]] = value
