"""Command line interface for ptp-conf.

Commands:
    ptp-conf classify FILE          Print the clock role of a ptp4l config
    ptp-conf render FILE            Re-render a ptp4l/ts2phc config
    ptp-conf synce FILE             Re-render a synce4l config with clock ids
    ptp-conf relations FILE         Print the SyncE relation graph as JSON

Example:
    $ ptp-conf synce synce4l.conf --setting "clockId[ens1f0]=5799633565432596414"
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional

import typer

from .config import Settings, load_settings
from .domain.conf import Document
from .exceptions import PtpConfError
from .parser import parse
from .render import render, render_synce
from .synce import extract_relations
from .utils import configure_logging, read_text

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="ptp-conf",
    help="Parse, classify and re-render linuxptp daemon configuration files.",
    no_args_is_help=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Settings TOML file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level"),
) -> None:
    """Load settings and configure logging for all commands."""
    try:
        settings = load_settings(config)
    except PtpConfError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    configure_logging("DEBUG" if verbose else settings.logging.level, settings.logging.structured)
    ctx.obj = settings


@app.command()
def classify(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="Configuration file"),
) -> None:
    """Print the clock role (GM, BC or OC) of a configuration."""
    document = _load_document(ctx.obj, file, None)
    typer.echo(document.clock_role.value)


@app.command("render")
def render_command(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="Configuration file"),
    profile: Optional[str] = typer.Option(None, "--profile", "-p", help="Profile name for the header"),
    ifaces: bool = typer.Option(False, "--ifaces", help="Also print discovered interfaces"),
) -> None:
    """Re-render a ptp4l/ts2phc configuration."""
    document = _load_document(ctx.obj, file, profile)
    text, discovered = render(document)
    typer.echo(text)

    if ifaces:
        typer.echo("")
        for iface in discovered:
            typer.echo(f"# {iface.name} source={iface.source.value} master={int(iface.is_master)}")


@app.command()
def synce(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="synce4l configuration file"),
    profile: Optional[str] = typer.Option(None, "--profile", "-p", help="Profile name for the header"),
    setting: List[str] = typer.Option([], "--setting", "-s", help="Profile setting KEY=VALUE, repeatable"),
) -> None:
    """Re-render a synce4l configuration, injecting device clock ids."""
    document = _load_document(ctx.obj, file, profile)
    settings = _parse_settings(setting)

    try:
        text, _ = render_synce(document, settings)
    except PtpConfError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(text)


@app.command()
def relations(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="synce4l configuration file"),
) -> None:
    """Print SyncE devices and their ports as JSON."""
    document = _load_document(ctx.obj, file, None)
    devices = [device.model_dump(exclude={"last_ql_state", "last_clock_state"}) for device in extract_relations(document)]
    typer.echo(json.dumps(devices, indent=2))


# Private helpers


def _load_document(settings: Optional[Settings], file: Path, profile: Optional[str]) -> Document:
    if profile is None:
        profile = settings.render.profile_name if settings else ""

    logger.debug(f"Loading {file} for profile '{profile}'")
    try:
        return parse(read_text(file), profile_name=profile)
    except FileNotFoundError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    except PtpConfError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def _parse_settings(pairs: List[str]) -> dict[str, str]:
    settings = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"expected KEY=VALUE, got '{pair}'", param_hint="--setting")
        settings[key] = value
    return settings


if __name__ == "__main__":
    app()
