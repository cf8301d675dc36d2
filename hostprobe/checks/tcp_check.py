from __future__ import annotations

import logging
import socket
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Sequence, TypeVar

from hostprobe.checks.results import ConnectResult

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ConnectError(RuntimeError):
    pass


def _dial(host: str, port: int, timeout_s: float) -> float:
    """Open and immediately close a TCP connection, returning the connect time in ms."""
    start = time.perf_counter()
    try:
        with socket.create_connection((host, port), timeout=timeout_s):
            return (time.perf_counter() - start) * 1000
    except (OSError, UnicodeError, OverflowError) as e:
        raise ConnectError(f"{host}:{port}: {e}") from e


def check_open(host: str, port: int, timeout_s: float = 2.0) -> bool:
    try:
        _dial(host, port, timeout_s)
    except ConnectError as e:
        logger.debug("Liveness probe failed: %s", e)
        return False
    return True


def measure_connect_latency(host: str, port: int, timeout_s: float = 5.0) -> ConnectResult:
    try:
        latency_ms = _dial(host, port, timeout_s)
    except ConnectError as e:
        logger.debug("Latency probe failed: %s", e)
        return ConnectResult(ok=False, error=str(e))
    return ConnectResult(ok=True, latency_ms=latency_ms)


def _map_ports(fn: Callable[[int], T], ports: Sequence[int], workers: int) -> list[T]:
    # Results always come back in the order of `ports`.
    if workers <= 1 or len(ports) <= 1:
        return [fn(port) for port in ports]
    with ThreadPoolExecutor(max_workers=min(workers, len(ports))) as pool:
        return list(pool.map(fn, ports))


def check_ports_open(
    host: str, ports: Sequence[int], timeout_s: float = 2.0, workers: int = 1
) -> list[bool]:
    return _map_ports(lambda port: check_open(host, port, timeout_s), ports, workers)


def measure_ports_latency(
    host: str, ports: Sequence[int], timeout_s: float = 5.0, workers: int = 1
) -> list[ConnectResult]:
    return _map_ports(
        lambda port: measure_connect_latency(host, port, timeout_s), ports, workers
    )
