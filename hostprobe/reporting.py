from __future__ import annotations

from typing import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from hostprobe.checks.results import ConnectResult
from hostprobe.formatting import (
    LATENCY_HEADERS,
    PORT_LATENCY_HEADERS,
    PORT_STATUS_HEADERS,
    Row,
    format_average,
    latency_rows,
    port_latency_rows,
    port_status_rows,
)
from hostprobe.models import ResolvedAddress
from hostprobe.stats import average_latency, is_high_latency

HIGH_LATENCY_MESSAGE = "This response time seems high."
PORT_STATUS_TITLE = "Port Check Results:"
PORT_LATENCY_TITLE = "TCP Connection Time Results (Latency with 5 Second Count):"


def build_table(headers: Sequence[str], rows: Sequence[Row]) -> Table:
    table = Table(show_header=True, header_style="bold")
    for header in headers:
        table.add_column(header)
    for row in rows:
        table.add_row(
            *(
                Text(cell, style=row.style_for(col) or "")
                for col, cell in enumerate(row.cells)
            )
        )
    return table


def render_resolved(
    console: Console, target: str, addresses: Sequence[ResolvedAddress]
) -> None:
    if not addresses:
        return
    console.print()
    console.print(f"Domain: {target}", markup=False)
    for address in addresses:
        console.print(f"Resolved IP: {address.ip}", markup=False)
    console.print()


def render_latency_report(
    console: Console, target: str, duration_s: int, samples: Sequence[float]
) -> float:
    """Print the per-reply table, the average and the high-latency advisory.

    Callers must only pass a non-empty ``samples``.
    """
    console.print(build_table(LATENCY_HEADERS, latency_rows(samples)))
    average = average_latency(samples)
    console.print(format_average(target, duration_s, average), markup=False)
    if is_high_latency(average):
        console.print(HIGH_LATENCY_MESSAGE)
    return average


def render_port_status(
    console: Console, ports: Sequence[int], statuses: Sequence[bool]
) -> None:
    console.print(PORT_STATUS_TITLE)
    console.print(build_table(PORT_STATUS_HEADERS, port_status_rows(ports, statuses)))
    console.print()


def render_port_latency(
    console: Console, ports: Sequence[int], results: Sequence[ConnectResult]
) -> None:
    console.print(PORT_LATENCY_TITLE)
    console.print(build_table(PORT_LATENCY_HEADERS, port_latency_rows(ports, results)))
    console.print()
