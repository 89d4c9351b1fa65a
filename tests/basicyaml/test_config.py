from __future__ import annotations

import pytest
from pydantic import ValidationError

from basicyaml.config import EmitterOptions, Settings, load_settings
from basicyaml.errors import YamlError


def test_defaults() -> None:
    settings = load_settings()
    assert settings.emitter == EmitterOptions()
    assert settings.emitter.indent == 2
    assert settings.emitter.flow_threshold == 5
    assert settings.emitter.sort_keys is False
    assert settings.encoding == "utf-8"
    assert settings.log_level == "WARNING"


def test_settings_file_is_merged(write_yaml) -> None:
    path = write_yaml("emitter:\n  indent: 4\n  sort_keys: yes\n", name="settings.yaml")
    settings = load_settings(config_path=path)
    assert settings.emitter.indent == 4
    assert settings.emitter.sort_keys is True
    assert settings.emitter.flow_threshold == 5


def test_overrides_apply_after_file(write_yaml) -> None:
    path = write_yaml("emitter:\n  indent: 4\n", name="settings.yaml")
    settings = load_settings(
        config_path=path,
        overrides={"emitter.indent": 3, "log_level": "debug", "encoding": None},
    )
    assert settings.emitter.indent == 3
    assert settings.log_level == "DEBUG"
    assert settings.encoding == "utf-8"


def test_invalid_log_level() -> None:
    with pytest.raises(ValidationError):
        Settings(log_level="chatty")


def test_indent_out_of_range() -> None:
    with pytest.raises(ValidationError):
        load_settings(overrides={"emitter.indent": 0})
    with pytest.raises(ValidationError):
        EmitterOptions(flow_threshold=-1)


def test_broken_settings_file(write_yaml) -> None:
    path = write_yaml("emitter: indent: 4\n", name="settings.yaml")
    with pytest.raises(YamlError):
        load_settings(config_path=path)
