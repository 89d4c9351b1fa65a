from __future__ import annotations

from typer.testing import CliRunner

from basicyaml.app import app

runner = CliRunner()

SAMPLE = """
server:
  host: example.org
  ports: [80, 443]
notes: |
  hello
"""


def test_check_reports_ok(write_yaml) -> None:
    path = write_yaml(SAMPLE)
    result = runner.invoke(app, ["check", str(path)])
    assert result.exit_code == 0
    assert "OK (2 top-level keys)" in result.output


def test_check_reports_parse_errors(write_yaml) -> None:
    path = write_yaml("key: hello: world\n")
    result = runner.invoke(app, ["check", str(path)])
    assert result.exit_code == 1


def test_check_missing_file(tmp_path) -> None:
    result = runner.invoke(app, ["check", str(tmp_path / "nope.yaml")])
    assert result.exit_code == 1


def test_get_scalar_and_default(write_yaml) -> None:
    path = write_yaml(SAMPLE)
    result = runner.invoke(app, ["get", str(path), "server.ports[1]"])
    assert result.exit_code == 0
    assert result.output.strip() == "443"

    result = runner.invoke(app, ["get", str(path), "server.missing", "--default", "fallback"])
    assert result.exit_code == 0
    assert result.output.strip() == "fallback"


def test_get_missing_without_default(write_yaml) -> None:
    path = write_yaml(SAMPLE)
    result = runner.invoke(app, ["get", str(path), "server.missing"])
    assert result.exit_code == 1


def test_get_subtree_is_serialized(write_yaml) -> None:
    path = write_yaml(SAMPLE)
    result = runner.invoke(app, ["get", str(path), "server"])
    assert result.exit_code == 0
    assert result.output == "host: example.org\nports: [80, 443]\n"


def test_dump_with_override(write_yaml) -> None:
    path = write_yaml("a:\n  b:\n    c: 1\n    d: [x]\n")
    result = runner.invoke(app, ["dump", str(path), "-o", "emitter.indent=4", "-o", "emitter.flow_threshold=0"])
    assert result.exit_code == 0
    assert result.output == "a:\n    b:\n        c: 1\n        d:\n            - x\n"


def test_dump_with_settings_file(write_yaml) -> None:
    path = write_yaml("zeta: 1\nalpha: 2\n")
    settings = write_yaml("emitter:\n  sort_keys: true\n", name="settings.yaml")
    result = runner.invoke(app, ["dump", str(path), "--config", str(settings)])
    assert result.exit_code == 0
    assert result.output == "alpha: 2\nzeta: 1\n"


def test_invalid_override_is_rejected(write_yaml) -> None:
    path = write_yaml("a: 1\n")
    result = runner.invoke(app, ["dump", str(path), "-o", "emitter.indent=99"])
    assert result.exit_code != 0


def test_show_renders_tree(write_yaml) -> None:
    path = write_yaml(SAMPLE)
    result = runner.invoke(app, ["show", str(path)])
    assert result.exit_code == 0
    assert "server" in result.output
    assert "host" in result.output
    assert "ports" in result.output
