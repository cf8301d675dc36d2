from __future__ import annotations

from dataclasses import dataclass


@dataclass
class EchoResult:
    ok: bool
    output: str
    returncode: int | None = None
    error: str | None = None


@dataclass
class ConnectResult:
    ok: bool
    latency_ms: float | None = None
    error: str | None = None
