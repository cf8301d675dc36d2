from __future__ import annotations

import logging

from rich.console import Console

from hostprobe.checks.echo import run_echo
from hostprobe.checks.tcp_check import check_ports_open, measure_ports_latency
from hostprobe.config import Settings, settings as default_settings
from hostprobe.models import PortResult, ProbeConfig, ReachabilityReport, ResolvedAddress
from hostprobe.parsing import parse_latency_series
from hostprobe.reporting import (
    render_latency_report,
    render_port_latency,
    render_port_status,
    render_resolved,
)
from hostprobe.resolver import ResolutionError, is_ip_literal, resolve

logger = logging.getLogger(__name__)


def _resolve_target(
    console: Console, target: str
) -> tuple[list[ResolvedAddress], str | None]:
    try:
        addresses = resolve(target)
    except ResolutionError as exc:
        logger.warning("DNS lookup for %s failed: %s", target, exc)
        console.print(f"Failed to lookup IP for domain {target}: {exc}", markup=False)
        return [], str(exc)
    render_resolved(console, target, addresses)
    return addresses, None


def run_report(
    config: ProbeConfig,
    console: Console | None = None,
    settings: Settings = default_settings,
) -> ReachabilityReport:
    console = console or Console(highlight=False)
    target = config.target
    duration_s = config.duration_s
    ports = tuple(settings.PORTS)

    console.print(f"The ping will run for {duration_s} seconds...")

    echo = run_echo(target, duration_s, ping_bin=settings.PING_BIN)
    samples = parse_latency_series(echo.output)
    logger.info("Collected %d latency sample(s) for %s", len(samples), target)

    addresses: list[ResolvedAddress] = []
    resolution_error: str | None = None
    if not is_ip_literal(target):
        addresses, resolution_error = _resolve_target(console, target)

    if not samples:
        console.print(
            f"Failed to ping {target} or no response in {duration_s} seconds.",
            markup=False,
        )
    else:
        render_latency_report(console, target, duration_s, samples)

    statuses = check_ports_open(
        target,
        ports,
        timeout_s=settings.OPEN_TIMEOUT_SECONDS,
        workers=settings.PORT_WORKERS,
    )
    render_port_status(console, ports, statuses)

    latencies = measure_ports_latency(
        target,
        ports,
        timeout_s=settings.CONNECT_TIMEOUT_SECONDS,
        workers=settings.PORT_WORKERS,
    )
    render_port_latency(console, ports, latencies)

    return ReachabilityReport(
        config=config,
        samples=samples,
        addresses=addresses,
        resolution_error=resolution_error,
        ports=[
            PortResult(port=port, open=is_open, connect_latency_ms=res.latency_ms)
            for port, is_open, res in zip(ports, statuses, latencies)
        ],
    )
