from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from lanwake.cli.common import (
    build_database,
    load_settings_or_exit,
    load_targets_or_exit,
)
from lanwake.core import is_valid_mac
from lanwake.core.wol import is_valid_port
from lanwake.models import Device

app = typer.Typer(no_args_is_help=True, help="Manage saved wake targets.")


@app.command("list")
def list_targets() -> None:
    """List saved wake targets."""
    settings = load_settings_or_exit()
    db = build_database(settings)
    registry = load_targets_or_exit(db)

    console = Console()

    if not registry.targets:
        console.print("No saved targets.")
        console.print(f"Use 'lanwake targets add' or edit {db.targets_path}")
        return

    table = Table()
    table.add_column("Name", style="cyan")
    table.add_column("Address", style="green")
    table.add_column("MAC Address")
    table.add_column("Port")

    for name, device in sorted(registry.targets.items()):
        port = settings.wake.port if device.wol_port is None else device.wol_port
        table.add_row(name, device.ip_address, device.mac_address, str(port))

    console.print(table)


@app.command("add")
def add_target(
    name: str = typer.Argument(..., help="Target name"),
    address: str = typer.Argument(..., help="IP address or hostname"),
    mac: str = typer.Argument(..., help="MAC address (AA:BB:CC:DD:EE:FF)"),
    port: int | None = typer.Option(None, "--port", help="Wake-on-LAN UDP port"),
) -> None:
    """Add or update a saved wake target."""
    console = Console()
    if not is_valid_mac(mac):
        console.print(f"[red]✗[/red] Invalid MAC address '{mac}'")
        raise typer.Exit(1)
    if port is not None and not is_valid_port(port):
        console.print(f"[red]✗[/red] Invalid port '{port}'")
        raise typer.Exit(1)

    settings = load_settings_or_exit()
    db = build_database(settings)
    load_targets_or_exit(db)
    db.add_target(name, Device(ip_address=address, mac_address=mac, wol_port=port))

    console.print(f"[green]✓[/green] Saved '{name}' → {address} ({mac})")


@app.command("remove")
def remove_target(name: str = typer.Argument(..., help="Target name")) -> None:
    """Remove a saved wake target."""
    settings = load_settings_or_exit()
    db = build_database(settings)
    load_targets_or_exit(db)

    console = Console()
    if db.remove_target(name):
        console.print(f"[green]✓[/green] Removed target '{name}'")
    else:
        console.print(f"[yellow]![/yellow] Target '{name}' not found")
        raise typer.Exit(1)
