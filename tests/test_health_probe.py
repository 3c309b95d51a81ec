"""Tests for the asyncio TCP reachability probe."""

import asyncio
import math
import socket

import pytest

from app.health import (
    DEFAULT_HEALTH_TIMEOUT_MS,
    HealthProbeError,
    ProbeConnectionError,
    ProbeRequest,
    ProbeTimeoutError,
    health_resolve_timeout_ms,
    health_tcp_probe,
)


def _health_unused_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as probe_socket:
        probe_socket.bind(("127.0.0.1", 0))
        return probe_socket.getsockname()[1]


def test_health_tcp_probe_succeeds_against_listening_server() -> None:
    """Complete without error when a listener accepts the connection.

    Returns:
        None: Assertions validate probe behavior.

    Raises:
        AssertionError: Raised when the probe does not reach the listener.
    """

    accepted_connections: list[int] = []

    async def _handle_connection(_reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        accepted_connections.append(1)
        writer.close()

    async def _run() -> None:
        server = await asyncio.start_server(_handle_connection, "127.0.0.1", 0)
        port = server.sockets[0].getsockname()[1]
        async with server:
            await health_tcp_probe(ProbeRequest(host="127.0.0.1", port=port, timeout_ms=1000, label="database"))
            await asyncio.sleep(0.05)

    asyncio.run(_run())

    assert accepted_connections == [1]


def test_health_tcp_probe_reports_refused_connection() -> None:
    """Raise a connection error naming the target when nothing listens."""

    port = _health_unused_port()

    with pytest.raises(ProbeConnectionError) as error_info:
        asyncio.run(health_tcp_probe(ProbeRequest(host="127.0.0.1", port=port, timeout_ms=1000, label="cache")))

    error = error_info.value
    assert isinstance(error, ConnectionError)
    assert isinstance(error, HealthProbeError)
    assert error.label == "cache"
    assert f"127.0.0.1:{port}" in str(error)


def test_health_tcp_probe_times_out(monkeypatch: pytest.MonkeyPatch) -> None:
    """Raise a timeout error when the connection does not settle in time."""

    async def _never_connects(*_args, **_kwargs):
        await asyncio.sleep(10)

    monkeypatch.setattr(asyncio, "open_connection", _never_connects)

    with pytest.raises(ProbeTimeoutError) as error_info:
        asyncio.run(health_tcp_probe(ProbeRequest(host="db.internal", port=5432, timeout_ms=20, label="database")))

    assert isinstance(error_info.value, TimeoutError)
    assert str(error_info.value) == "Connection to db.internal:5432 timed out after 20ms"


@pytest.mark.parametrize("timeout_ms", [None, 0, -5, math.inf, math.nan])
def test_health_resolve_timeout_ms_falls_back_for_invalid_values(timeout_ms: float | None) -> None:
    """Use the default timeout for absent, non-positive or non-finite values."""

    assert health_resolve_timeout_ms(timeout_ms) == DEFAULT_HEALTH_TIMEOUT_MS


def test_health_resolve_timeout_ms_keeps_valid_value() -> None:
    """Keep a positive finite timeout."""

    assert health_resolve_timeout_ms(250) == 250
