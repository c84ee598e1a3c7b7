"""Commands to inspect the resolved mensura configuration."""
from __future__ import annotations

import json
import os
from pathlib import Path

import typer

from ..config import get_settings

__all__ = ["app"]

app = typer.Typer(help="Inspect runtime configuration.", add_completion=False)


@app.command("show")
def show_settings(
    config_file: Path = typer.Option(
        None,
        "--config-file",
        exists=True,
        dir_okay=False,
        readable=True,
        help="Alternative TOML/YAML configuration to use instead of environment variables.",
    ),
    refresh: bool = typer.Option(False, "--refresh", help="Ignore the cache and rebuild the settings."),
) -> None:
    """Print the resolved settings as JSON."""

    try:
        settings = get_settings(refresh=refresh, config_file=config_file)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    if config_file is not None:
        source = str(config_file)
    else:
        source = os.getenv("MENSURA_CONFIG_FILE") or "environment"
    payload = {"config_source": source, "settings": settings.as_dict()}
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
