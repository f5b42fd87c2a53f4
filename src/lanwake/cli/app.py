from __future__ import annotations

from typing import Annotated

import typer

from lanwake.utils.logging import setup_logging

from .commands import config as config_cmd
from .commands import targets as targets_cmd
from .commands.init import register as register_init
from .commands.scan import register as register_scan
from .commands.status import register as register_status
from .commands.wake import register as register_wake

app = typer.Typer(
    help="lanwake - find hosts on your network and wake them", no_args_is_help=True
)

app.add_typer(config_cmd.app, name="config")
app.add_typer(targets_cmd.app, name="targets")

register_init(app)
register_scan(app)
register_wake(app)
register_status(app)


@app.callback(invoke_without_command=True)
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", help="Show version and exit"),
    ] = False,
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", help="Log level; overrides $LOGLEVEL"),
    ] = None,
) -> None:
    """lanwake CLI."""
    setup_logging(log_level)

    if version:
        from importlib.metadata import version as get_version

        typer.echo(f"lanwake version {get_version('lanwake')}")
        raise typer.Exit()
