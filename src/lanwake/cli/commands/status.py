from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from lanwake.cli.common import (
    build_database,
    load_settings_or_exit,
    load_targets_or_exit,
)
from lanwake.core import check_status


def status(
    names: list[str] | None = typer.Argument(
        None,
        help="Saved target names or addresses. Checks all saved targets if omitted.",
    ),
) -> None:
    """Ping hosts once and show which are online."""
    console = Console()
    settings = load_settings_or_exit()
    registry = load_targets_or_exit(build_database(settings))

    if not names:
        names = sorted(registry.targets)
    if not names:
        console.print("No saved targets to check.")
        return

    addresses = {
        name: registry.targets[name].ip_address if name in registry.targets else name
        for name in names
    }
    results = asyncio.run(check_status(addresses.values(), settings.status.timeout))

    table = Table()
    table.add_column("Name", style="cyan")
    table.add_column("Address", style="green")
    table.add_column("Status")
    for name, address in addresses.items():
        online = results[address]
        table.add_row(
            name,
            address,
            "[green]online[/green]" if online else "[red]offline[/red]",
        )

    console.print(table)


def register(app: typer.Typer) -> None:
    app.command()(status)
