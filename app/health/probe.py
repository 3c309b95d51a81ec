"""TCP reachability probe on top of asyncio streams."""

from __future__ import annotations

import asyncio
import contextlib
import math

from .errors import ProbeConnectionError, ProbeTimeoutError
from .interfaces import DEFAULT_HEALTH_TIMEOUT_MS, ProbeRequest


def health_resolve_timeout_ms(timeout_ms: float | None) -> float:
    """Return a usable timeout, falling back to the default for invalid input."""

    if timeout_ms is not None and math.isfinite(timeout_ms) and timeout_ms > 0:
        return timeout_ms
    return DEFAULT_HEALTH_TIMEOUT_MS


async def health_tcp_probe(request: ProbeRequest) -> None:
    """Open and immediately close a TCP connection to the target.

    The socket is released on every exit path: on success the writer is
    closed, on timeout `asyncio.wait_for` cancels the pending connect, and a
    failed connect leaves no open transport.

    Args:
        request: Target host, port, timeout and label.

    Returns:
        None: Completes once the connection is established.

    Raises:
        ProbeTimeoutError: Raised when the connection does not settle in time.
        ProbeConnectionError: Raised when the connection is refused or fails.
    """

    timeout_ms = health_resolve_timeout_ms(request.timeout_ms)
    try:
        _reader, writer = await asyncio.wait_for(
            asyncio.open_connection(request.host, request.port),
            timeout=timeout_ms / 1000,
        )
    except asyncio.TimeoutError as error:
        raise ProbeTimeoutError(
            f"Connection to {request.host}:{request.port} timed out after {timeout_ms:g}ms",
            label=request.label,
        ) from error
    except OSError as error:
        raise ProbeConnectionError(
            f"Connection to {request.host}:{request.port} failed: {error}",
            label=request.label,
        ) from error

    writer.close()
    with contextlib.suppress(OSError):
        await writer.wait_closed()
