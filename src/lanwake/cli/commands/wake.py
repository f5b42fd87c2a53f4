from __future__ import annotations

import asyncio
import contextlib

import typer
from rich.console import Console
from rich.live import Live
from rich.markup import escape

from lanwake.cli.common import (
    build_database,
    load_settings_or_exit,
    load_targets_or_exit,
)
from lanwake.config import Settings, WakeConfig
from lanwake.core import wake_with_log
from lanwake.models import Device, Message, MessageKind

ICONS = {
    MessageKind.INFO: "[blue]i[/blue]",
    MessageKind.ERROR: "[red]✗[/red]",
    MessageKind.CHECK: "[green]✓[/green]",
    MessageKind.PING: "[yellow]…[/yellow]",
    MessageKind.ONLINE: "[bold green]●[/bold green]",
}


def render_log(log: list[Message]) -> str:
    return "\n".join(f"{ICONS[item.kind]} {escape(item.text)}" for item in log)


async def _run(device: Device, config: WakeConfig, console: Console) -> list[Message]:
    log: list[Message] = []
    with Live(console=console, refresh_per_second=8) as live:
        async with contextlib.aclosing(wake_with_log(device, config)) as updates:
            async for log in updates:
                live.update(render_log(log))
    return log


def _build_target(
    settings: Settings, target: str, mac: str | None, port: int | None
) -> Device | None:
    db = build_database(settings)
    saved = load_targets_or_exit(db).targets.get(target)

    if saved is not None:
        update: dict[str, object] = {}
        if mac is not None:
            update["mac_address"] = mac
        if port is not None:
            update["wol_port"] = port
        elif saved.wol_port is None:
            update["wol_port"] = settings.wake.port
        return saved.model_copy(update=update)

    if mac is None:
        return None
    return Device(
        ip_address=target,
        mac_address=mac,
        wol_port=settings.wake.port if port is None else port,
    )


def wake(
    target: str = typer.Argument(..., help="Saved target name, IP address or hostname"),
    mac: str | None = typer.Option(
        None, "--mac", help="MAC address (AA:BB:CC:DD:EE:FF)"
    ),
    port: int | None = typer.Option(None, "--port", help="Wake-on-LAN UDP port"),
) -> None:
    """Send a Wake-on-LAN packet and wait for the host to answer pings."""
    console = Console()
    settings = load_settings_or_exit()

    device = _build_target(settings, target, mac, port)
    if device is None:
        console.print(
            f"[yellow]![/yellow] No saved target '{target}'; "
            "pass --mac to wake an address directly"
        )
        raise typer.Exit(1)

    log = asyncio.run(_run(device, settings.wake, console))
    if not log or log[-1].kind is not MessageKind.ONLINE:
        raise typer.Exit(1)


def register(app: typer.Typer) -> None:
    app.command()(wake)
