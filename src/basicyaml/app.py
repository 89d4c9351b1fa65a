"""Command-line entry point for basicyaml."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, cast

import typer
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException
from rich.console import Console

from basicyaml.config import Settings, load_settings
from basicyaml.document import Document, load_file
from basicyaml.emitter import serialize
from basicyaml.errors import YamlError
from basicyaml.nodes import Scalar
from basicyaml.reporting.tree import print_tree

app = typer.Typer(help="basicyaml: parse, query, and re-emit indentation-based YAML files.")

LOG = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s :: %(message)s",
    )


def _settings(config_file: Optional[Path], options: Optional[List[str]], log_level: Optional[str]) -> Settings:
    overrides: Dict[str, Any] = {}
    if options:
        try:
            dotlist = OmegaConf.to_container(OmegaConf.from_dotlist(list(options)))
        except (OmegaConfBaseException, ValueError) as exc:
            raise typer.BadParameter(f"Invalid option override: {exc}") from exc
        overrides = _flatten(cast(Dict[str, Any], dotlist))
    if log_level:
        overrides["log_level"] = log_level
    try:
        settings = load_settings(config_path=config_file, overrides=overrides)
    except YamlError as exc:
        raise typer.BadParameter(str(exc)) from exc
    except ValueError as exc:
        raise typer.BadParameter(f"Invalid settings: {exc}") from exc
    _configure_logging(settings.log_level)
    return settings


def _flatten(values: Dict[str, Any], prefix: str = "") -> Dict[str, Any]:
    flat: Dict[str, Any] = {}
    for key, value in values.items():
        dotted = f"{prefix}{key}"
        if isinstance(value, dict):
            flat.update(_flatten(value, f"{dotted}."))
        else:
            flat[dotted] = value
    return flat


def _load(path: Path, settings: Settings) -> Document:
    try:
        return load_file(path, encoding=settings.encoding)
    except YamlError as exc:
        typer.secho(f"{path}: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


ConfigOption = typer.Option(
    None,
    "--config",
    "-c",
    help="Optional basicyaml settings file (emitter, encoding, log_level).",
)
OverrideOption = typer.Option(
    None,
    "--option",
    "-o",
    help="Dotted settings override, e.g. 'emitter.indent=4'. May be repeated.",
)
LogLevelOption = typer.Option(None, "--log-level", help="Logging level (DEBUG, INFO, ...).")


@app.command()
def check(
    path: Path = typer.Argument(..., help="YAML file to validate."),
    config_file: Optional[Path] = ConfigOption,
    options: Optional[List[str]] = OverrideOption,
    log_level: Optional[str] = LogLevelOption,
) -> None:
    """Parse a file and report whether it is valid."""
    settings = _settings(config_file, options, log_level)
    document = _load(path, settings)
    LOG.info("Parsed %s with %d top-level keys", path, len(document.root))
    typer.secho(f"{path}: OK ({len(document.root)} top-level keys)", fg=typer.colors.GREEN)


@app.command()
def get(
    path: Path = typer.Argument(..., help="YAML file to read."),
    lookup: str = typer.Argument(..., help="Dotted path with bracket indices, e.g. 'servers[0].host'."),
    default: Optional[str] = typer.Option(None, "--default", "-d", help="Value printed when the path is absent."),
    config_file: Optional[Path] = ConfigOption,
    options: Optional[List[str]] = OverrideOption,
    log_level: Optional[str] = LogLevelOption,
) -> None:
    """Print the value found at a path."""
    settings = _settings(config_file, options, log_level)
    document = _load(path, settings)
    found = document.at_path(lookup)
    if not found:
        if default is None:
            typer.secho(f"{lookup}: not found", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1)
        typer.echo(default)
        return
    if isinstance(found.node, Scalar):
        typer.echo(found.node.value)
    else:
        typer.echo(serialize(found.node, settings.emitter), nl=False)


@app.command()
def dump(
    path: Path = typer.Argument(..., help="YAML file to re-emit."),
    config_file: Optional[Path] = ConfigOption,
    options: Optional[List[str]] = OverrideOption,
    log_level: Optional[str] = LogLevelOption,
) -> None:
    """Parse a file and write it back out using the emitter settings."""
    settings = _settings(config_file, options, log_level)
    document = _load(path, settings)
    typer.echo(serialize(document, settings.emitter), nl=False)


@app.command()
def show(
    path: Path = typer.Argument(..., help="YAML file to display."),
    config_file: Optional[Path] = ConfigOption,
    options: Optional[List[str]] = OverrideOption,
    log_level: Optional[str] = LogLevelOption,
) -> None:
    """Render the parsed tree for debugging."""
    settings = _settings(config_file, options, log_level)
    document = _load(path, settings)
    print_tree(document.root, label=path.name, console=Console())


if __name__ == "__main__":  # pragma: no cover
    app()
