from __future__ import annotations

import typer

from lanwake.cli.common import load_settings_or_exit, resolve_config_path_or_exit
from lanwake.config import data_dir_from_settings, render_settings_toml

app = typer.Typer(no_args_is_help=True, help="Inspect configuration.")


@app.command("show")
def show_config() -> None:
    """Print the effective configuration as TOML."""
    settings = load_settings_or_exit()
    path, exists = resolve_config_path_or_exit(allow_missing=True)

    typer.echo(f"Config source: {path if exists else 'defaults'}")
    typer.echo(render_settings_toml(settings))


@app.command("path")
def show_paths() -> None:
    """Print where the config file and saved targets live."""
    settings = load_settings_or_exit()
    path, exists = resolve_config_path_or_exit(allow_missing=True)

    typer.echo(f"Config file: {path}{'' if exists else ' (not created)'}")
    typer.echo(f"Data directory: {data_dir_from_settings(settings)}")
