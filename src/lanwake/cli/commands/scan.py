from __future__ import annotations

import asyncio
import contextlib
import ipaddress
import logging

import typer
from rich.console import Console
from rich.progress import Progress
from rich.table import Table

from lanwake.cli.common import load_settings_or_exit
from lanwake.config import ScanningConfig
from lanwake.core import detect_local_prefix, scan_network
from lanwake.models import Device

logger = logging.getLogger(__name__)


async def _collect(
    prefix: str, config: ScanningConfig, console: Console
) -> list[Device]:
    devices: list[Device] = []
    with Progress(console=console, transient=True) as bar:
        task = bar.add_task(f"Pinging {prefix}.0/24", total=1.0)

        def on_progress(fraction: float) -> None:
            bar.update(task, completed=fraction)

        async with contextlib.aclosing(
            scan_network(prefix, config, on_progress)
        ) as found:
            async for device in found:
                devices.append(device)
                console.print(
                    f"[green]+[/green] {device.ip_address} {device.host_name}".rstrip()
                )
    return devices


def scan(
    prefix: str | None = typer.Argument(
        None,
        help=(
            "First three octets of the network (e.g., 192.168.1). Uses the config "
            "default or the local network if omitted."
        ),
    ),
    timeout: float | None = typer.Option(
        None, "--timeout", min=0.01, help="Ping timeout per address in seconds"
    ),
) -> None:
    """Ping every address in a /24 network and list the hosts that answer."""
    console = Console()
    settings = load_settings_or_exit()

    config = settings.scanning
    if timeout is not None:
        config = config.model_copy(update={"timeout": timeout})

    if prefix is None:
        prefix = config.default_prefix
    if not prefix:
        try:
            prefix = detect_local_prefix()
        except RuntimeError as exc:
            console.print(f"[red]{exc}[/red]; pass the network prefix explicitly")
            raise typer.Exit(1) from exc
        console.print(f"Using local network: {prefix}.0/24")

    logger.info("Scan settings: timeout=%.2fs, lanes=%d", config.timeout, config.lanes)
    devices = asyncio.run(_collect(prefix, config, console))

    if not devices:
        console.print("No hosts answered.")
        return

    table = Table()
    table.add_column("IP", style="cyan")
    table.add_column("Host name", style="green")

    for device in sorted(devices, key=lambda d: ipaddress.IPv4Address(d.ip_address)):
        table.add_row(device.ip_address, device.host_name)

    console.print(table)
    console.print(f"\n[green]Found {len(devices)} host(s)[/green]")


def register(app: typer.Typer) -> None:
    app.command()(scan)
