"""Typer CLI handlers for hiera.

Exposes lookups, data source enumeration, datadir resolution and string
interpolation from the command line. Scope variables are given as
``name=value`` arguments and may be seeded from a YAML or JSON file.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer
import yaml
from rich.console import Console

from hiera.backend.base import ResolutionType
from hiera.backend.interpolation import parse_string
from hiera.client import Hiera
from hiera.utils.exceptions import HieraError
from hiera.utils.logging import configure_logging

logger = logging.getLogger(__name__)

err_console = Console(stderr=True)

# --------------------------------------------------------------------------- #
# Typer app – entry-point is exposed in pyproject.toml as "hiera"             #
# --------------------------------------------------------------------------- #
app = typer.Typer(help="Hierarchical key/value lookup over pluggable backends.")


@app.callback(invoke_without_command=False)
def _root_options(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (defaults to $HIERA_CONFIG or /etc/hiera.yaml)",
    ),
    debug: bool = typer.Option(False, "--debug", "-d", help="Show debug logging"),
):
    """Shared options processed before any sub-command executes."""
    configure_logging(logging.DEBUG if debug else logging.WARNING, use_rich=True)
    ctx.obj = {"config": config, "debug": debug}


# --------------------------------------------------------------------------- #
# Helpers                                                                     #
# --------------------------------------------------------------------------- #
def parse_scope_args(args: List[str]) -> Dict[str, str]:
    """Turn ``["env=prod", "role=web"]`` into a dict."""
    scope: Dict[str, str] = {}
    for arg in args:
        name, sep, value = arg.partition("=")
        if not sep or not name:
            raise typer.BadParameter(f"Scope variables must be name=value, got {arg!r}")
        scope[name] = value
    return scope


def load_scope_file(path: Path, fmt: str) -> Dict[str, Any]:
    """Read a scope mapping from a YAML or JSON file."""
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = json.load(fh) if fmt == "json" else yaml.safe_load(fh)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise typer.BadParameter(f"Could not load {fmt} scope from {path}: {exc}")
    if not isinstance(data, dict):
        raise typer.BadParameter(f"Scope file {path} must contain a mapping")
    return data


def build_scope(
    args: List[str],
    yaml_scope: Optional[Path] = None,
    json_scope: Optional[Path] = None,
) -> Dict[str, Any]:
    scope: Dict[str, Any] = {}
    if yaml_scope:
        scope.update(load_scope_file(yaml_scope, "yaml"))
    if json_scope:
        scope.update(load_scope_file(json_scope, "json"))
    scope.update(parse_scope_args(args))
    return scope


def _hiera(ctx: typer.Context) -> Hiera:
    try:
        overrides = {"log_level": "DEBUG"} if ctx.obj["debug"] else None
        return Hiera(ctx.obj["config"], overrides)
    except HieraError as e:
        err_console.print(f"[red]Failed to start hiera: {e}[/red]")
        raise typer.Exit(1)


def _echo_answer(answer: Any) -> None:
    if answer is None:
        typer.echo("nil")
    elif isinstance(answer, str):
        typer.echo(answer)
    else:
        typer.echo(json.dumps(answer, indent=2, sort_keys=True))


# --------------------------------------------------------------------------- #
# Commands                                                                    #
# --------------------------------------------------------------------------- #
@app.command("lookup")
def lookup_command(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="Key to look up"),
    variables: List[str] = typer.Argument(None, help="Scope variables as name=value"),
    default: Optional[str] = typer.Option(None, "--default", help="Value returned when nothing answers"),
    array: bool = typer.Option(False, "--array", "-a", help="Collect answers from every source into a list"),
    hash_: bool = typer.Option(False, "--hash", "-h", help="Merge hash answers from every source"),
    yaml_scope: Optional[Path] = typer.Option(None, "--yaml-scope", "-y", help="YAML file with scope variables"),
    json_scope: Optional[Path] = typer.Option(None, "--json-scope", "-j", help="JSON file with scope variables"),
    override: Optional[str] = typer.Option(None, "--override", "-o", help="Source searched before the hierarchy"),
):
    """Look KEY up across the configured backends."""
    if array and hash_:
        raise typer.BadParameter("--array and --hash are mutually exclusive")
    resolution_type = ResolutionType.PRIORITY
    if array:
        resolution_type = ResolutionType.ARRAY
    elif hash_:
        resolution_type = ResolutionType.HASH

    scope = build_scope(variables or [], yaml_scope, json_scope)
    hiera = _hiera(ctx)
    try:
        answer = hiera.lookup(key, default, scope, override, resolution_type)
    except HieraError as e:
        err_console.print(f"[red]Lookup of {key} failed: {e}[/red]")
        raise typer.Exit(1)
    _echo_answer(answer)


@app.command("datasources")
def datasources_command(
    ctx: typer.Context,
    variables: List[str] = typer.Argument(None, help="Scope variables as name=value"),
    override: Optional[str] = typer.Option(None, "--override", "-o", help="Source searched before the hierarchy"),
    hierarchy: Optional[List[str]] = typer.Option(None, "--hierarchy", help="Replace the configured hierarchy"),
):
    """Print the interpolated data sources, highest precedence first."""
    scope = parse_scope_args(variables or [])
    hiera = _hiera(ctx)
    hiera.backend.datasources(scope, override, hierarchy or None, on_each=typer.echo)


@app.command("datadir")
def datadir_command(
    ctx: typer.Context,
    backend: str = typer.Argument(..., help="Backend name, e.g. yaml"),
    variables: List[str] = typer.Argument(None, help="Scope variables as name=value"),
):
    """Print the data directory BACKEND reads from."""
    scope = parse_scope_args(variables or [])
    typer.echo(_hiera(ctx).backend.datadir(backend, scope))


@app.command("interpolate")
def interpolate_command(
    template: str = typer.Argument(..., help="String containing %{name} placeholders"),
    variables: List[str] = typer.Argument(None, help="Scope variables as name=value"),
):
    """Expand %{name} placeholders in TEMPLATE."""
    typer.echo(parse_string(template, parse_scope_args(variables or [])))
