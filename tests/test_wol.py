"""Tests for the Wake-on-LAN pipeline."""

from __future__ import annotations

import asyncio

import pytest

from lanwake.config import WakeConfig
from lanwake.core import CancellationToken
from lanwake.core import wol as wol_module
from lanwake.models import Device, MessageKey, MessageKind

FAST = WakeConfig(broadcast_delay=0, ping_timeout=0.01)


class FakeNetwork:
    def __init__(self) -> None:
        self.sent: list[tuple[str, str, int]] = []
        self.probed: list[str] = []
        self.online_after: int | None = None
        self.send_error: Exception | None = None
        self.hosts: dict[str, str] = {}

    def send_magic_packet(self, mac: str, ip_address: str, port: int) -> None:
        if self.send_error is not None:
            raise self.send_error
        self.sent.append((mac, ip_address, port))

    async def probe(self, address: str, timeout: float) -> bool:
        self.probed.append(address)
        return self.online_after is not None and len(self.probed) >= self.online_after

    async def resolve_host(self, name: str) -> str | None:
        return self.hosts.get(name)


@pytest.fixture
def network(monkeypatch: pytest.MonkeyPatch) -> FakeNetwork:
    fake = FakeNetwork()
    monkeypatch.setattr(wol_module, "send_magic_packet", fake.send_magic_packet)
    monkeypatch.setattr(wol_module, "probe", fake.probe)
    monkeypatch.setattr(wol_module, "resolve_host", fake.resolve_host)
    return fake


def _wake(device: Device, config: WakeConfig = FAST, **kwargs):
    async def _run():
        return [m async for m in wol_module.wake(device, config, **kwargs)]

    return asyncio.run(_run())


def _keys(messages):
    return [m.key for m in messages]


VALID = Device(ip_address="192.168.1.20", mac_address="AA:BB:CC:DD:EE:FF", wol_port=9)


def test_valid_target_message_order(network):
    network.online_after = 1

    messages = _wake(VALID)

    assert _keys(messages) == [
        MessageKey.TARGET_VALID,
        MessageKey.SENDING_WOL,
        MessageKey.SEND_SUCCEEDED,
        MessageKey.PINGING_INFO,
        MessageKey.PING_ATTEMPT,
        MessageKey.PING_SUCCESS,
    ]
    assert messages[2].kind is MessageKind.CHECK
    assert "192.168.1.20" in messages[2].text
    assert messages[-1].kind is MessageKind.ONLINE


def test_magic_packet_sent_direct_then_broadcast(network):
    network.online_after = 1

    _wake(VALID)

    mac = "AA:BB:CC:DD:EE:FF"
    assert network.sent == [(mac, "192.168.1.20", 9)] * 3 + [
        (mac, "192.168.1.255", 9)
    ] * 3


def test_invalid_mac_reported_before_any_network_io(network):
    device = Device(ip_address="192.168.1.20", mac_address="00:11:22:33:44", wol_port=9)

    messages = _wake(device)

    assert _keys(messages) == [MessageKey.INVALID_MAC, MessageKey.INVALID_TARGET]
    assert "00:11:22:33:44" in messages[0].text
    assert all(m.kind is MessageKind.ERROR for m in messages)
    assert network.sent == []
    assert network.probed == []


def test_all_invalid_fields_reported_together(network):
    device = Device(ip_address="300.1.1.1", mac_address="nope", wol_port=70000)

    messages = _wake(device)

    assert _keys(messages) == [
        MessageKey.INVALID_IP,
        MessageKey.INVALID_MAC,
        MessageKey.INVALID_PORT,
        MessageKey.INVALID_TARGET,
    ]
    assert "70000" in messages[2].text


def test_missing_port_is_invalid(network):
    device = Device(ip_address="192.168.1.20", mac_address="AA:BB:CC:DD:EE:FF")

    messages = _wake(device)

    assert _keys(messages) == [MessageKey.INVALID_PORT, MessageKey.INVALID_TARGET]
    assert messages[0].args == ("",)


@pytest.mark.parametrize(
    ("port", "valid"), [(-1, False), (0, True), (65535, True), (65536, False)]
)
def test_port_boundaries(port, valid):
    result = wol_module.validate_target("192.168.1.20", "AA:BB:CC:DD:EE:FF", port)
    assert result.port_valid is valid
    assert result.ok is valid


def test_unresolvable_hostname_aborts(network):
    device = Device(ip_address="nas.lan", mac_address="AA:BB:CC:DD:EE:FF", wol_port=9)

    messages = _wake(device)

    assert _keys(messages) == [
        MessageKey.HOST_UNRESOLVABLE,
        MessageKey.INVALID_IP,
        MessageKey.INVALID_TARGET,
    ]
    assert "nas.lan" in messages[0].text
    assert network.sent == []


def test_hostname_resolved_before_sending_and_polling(network):
    network.hosts["nas.lan"] = "10.0.0.5"
    network.online_after = 2
    device = Device(ip_address="nas.lan", mac_address="AA:BB:CC:DD:EE:FF", wol_port=7)

    messages = _wake(device)

    assert messages[-1].key is MessageKey.PING_SUCCESS
    assert {ip for _, ip, _ in network.sent} == {"10.0.0.5", "10.0.0.255"}
    assert network.probed == ["10.0.0.5", "10.0.0.5"]


def test_send_failure_is_reported_and_polling_continues(network):
    network.send_error = OSError("network unreachable")
    network.online_after = 1

    messages = _wake(VALID)

    assert _keys(messages) == [
        MessageKey.TARGET_VALID,
        MessageKey.SENDING_WOL,
        MessageKey.SEND_FAILED,
        MessageKey.PINGING_INFO,
        MessageKey.PING_ATTEMPT,
        MessageKey.PING_SUCCESS,
    ]
    assert messages[2].kind is MessageKind.ERROR


def test_poll_gives_up_after_max_tries(network):
    messages = _wake(VALID)

    pings = [m for m in messages if m.kind is MessageKind.PING]
    assert len(pings) == 25
    assert [m.args for m in pings] == [(n,) for n in range(1, 26)]
    assert len(network.probed) == 25
    assert messages[-1].key is MessageKey.PING_FAIL
    assert messages[-1].kind is MessageKind.ERROR


def test_poll_stops_at_first_answer(network):
    network.online_after = 3

    messages = _wake(VALID)

    pings = [m for m in messages if m.kind is MessageKind.PING]
    assert len(pings) == 3
    assert messages[-1].kind is MessageKind.ONLINE


def test_cancellation_stops_the_stream(network):
    token = CancellationToken()

    async def _run():
        seen = []
        async for message in wol_module.wake(VALID, FAST, token=token):
            seen.append(message)
            if message.kind is MessageKind.PING and message.args == (2,):
                token.cancel()
        return seen

    messages = asyncio.run(_run())

    assert messages[-1].args == (2,)
    assert len(network.probed) == 2


def test_custom_formatter_gets_key_and_args(network):
    network.online_after = 1

    def _formatter(key, *args):
        return f"{key.value}:{','.join(str(a) for a in args)}"

    messages = _wake(VALID, formatter=_formatter)

    assert messages[2].text == "send_succeeded:192.168.1.20"
    assert messages[4].text == "ping_attempt:1"


def test_wake_with_log_coalesces_pings(network):
    network.online_after = 4

    async def _run():
        return [
            log async for log in wol_module.wake_with_log(VALID, FAST)
        ]

    snapshots = asyncio.run(_run())
    final = snapshots[-1]

    assert _keys(final) == [
        MessageKey.TARGET_VALID,
        MessageKey.SENDING_WOL,
        MessageKey.SEND_SUCCEEDED,
        MessageKey.PINGING_INFO,
        MessageKey.PING_ATTEMPT,
        MessageKey.PING_SUCCESS,
    ]
    assert final[4].args == (4,)
    assert len(snapshots) == 9


def test_cancel_on_target_valid_sends_nothing(network):
    token = CancellationToken()

    async def _run():
        seen = []
        async for message in wol_module.wake(VALID, FAST, token=token):
            seen.append(message)
            if message.key is MessageKey.TARGET_VALID:
                token.cancel()
        return seen

    messages = asyncio.run(_run())

    assert _keys(messages) == [MessageKey.TARGET_VALID]
    assert network.sent == []
    assert network.probed == []


def test_cancel_between_direct_and_broadcast_bursts(network, monkeypatch):
    token = CancellationToken()
    direct_send = network.send_magic_packet

    def _send_then_cancel(mac, ip_address, port):
        direct_send(mac, ip_address=ip_address, port=port)
        if len(network.sent) == 3:
            token.cancel()

    monkeypatch.setattr(wol_module, "send_magic_packet", _send_then_cancel)

    messages = _wake(VALID, token=token)

    assert _keys(messages) == [MessageKey.TARGET_VALID, MessageKey.SENDING_WOL]
    assert [ip for _, ip, _ in network.sent] == ["192.168.1.20"] * 3
    assert network.probed == []


def test_cancel_after_send_result_skips_polling(network):
    token = CancellationToken()

    async def _run():
        seen = []
        async for message in wol_module.wake(VALID, FAST, token=token):
            seen.append(message)
            if message.key is MessageKey.SEND_SUCCEEDED:
                token.cancel()
        return seen

    messages = asyncio.run(_run())

    assert messages[-1].key is MessageKey.SEND_SUCCEEDED
    assert network.probed == []
