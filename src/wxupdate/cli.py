"""Weather Underground station updater CLI.

This module provides the command-line interface: a single-shot ``run``
command meant to be called by cron or a systemd timer, plus helpers to
check the configuration file.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Final

import typer

from wxupdate.controller import WundergroundUpdater
from wxupdate.errors import WxUpdateError
from wxupdate.settings.user import StationSettings

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Weather Underground station updater", add_completion=False)
config_app = typer.Typer(help="Config helpers")
app.add_typer(config_app, name="config")

logger: Final = logging.getLogger(__name__)  # Will be "wxupdate.cli"

# Options for the main command
CONFIG_OPTION = typer.Option(
    None,
    "--config",
    "-c",
    exists=True,
    dir_okay=False,
    help="Properties or YAML file (default: search WXUPDATE_CONFIG and standard paths)",
)
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
DRY_RUN_OPTION = typer.Option(False, "--dry-run", "-n", help="Build the URL but do not send it")
SHOW_PASSWORD_OPTION = typer.Option(
    False, "--show-password", help="Print the URL with the password (masked by default)"
)
CONFIG_FILE_ARGUMENT = typer.Argument(..., exists=True, dir_okay=False, help="Config file")
SHOW_FILE_ARGUMENT = typer.Argument(None, dir_okay=False, help="Config file")


@app.command()
def run(
    config: Path | None = CONFIG_OPTION,
    dry_run: bool = DRY_RUN_OPTION,
    show_password: bool = SHOW_PASSWORD_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Upload the newest log observation once, then exit.

    Prints the update URL, with PASSWORD masked unless --show-password is
    given, followed by the response body.
    """
    try:
        updater = WundergroundUpdater(config, debug=debug)
        result = updater.run_once(dry_run=dry_run)
    except WxUpdateError as exc:
        logger.error("Update failed: %s", exc)
        raise typer.Exit(code=1) from exc

    url = result.request.url if show_password else result.request.redacted_url
    typer.echo(f"URL: {url}")
    if result.response is not None:
        typer.echo(result.response.body.rstrip("\r\n"))


# ───────────────────────── config sub-commands ───────────────────────────────
@config_app.command("validate")
def validate_config(file: Path = CONFIG_FILE_ARGUMENT):
    """Validate a config file against the schema."""
    try:
        StationSettings.load(file)
        typer.echo("✅ Config valid")
    except WxUpdateError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


@config_app.command("show")
def show_config(file: Path | None = SHOW_FILE_ARGUMENT):
    """Print the loaded settings with the password masked."""
    try:
        settings = StationSettings.load(file)
    except WxUpdateError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc

    for name, value in settings.masked_items().items():
        typer.echo(f"{name}: {value}")


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
