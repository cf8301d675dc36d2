from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from hostprobe.checks.results import ConnectResult
from hostprobe.stats import bar_length

BAR_CHAR = "█"
BAR_STYLES = ("blue", "green")

LATENCY_HEADERS = ("Ping number", "Response Time (ms)", "Graph")
PORT_STATUS_HEADERS = ("Port", "Status")
PORT_LATENCY_HEADERS = ("Port", "Latency (ms)")

STATUS_OPEN = "Open/Responded"
STATUS_NO_RESPONSE = "No Response"
UNABLE_TO_CONNECT = "Unable to connect"


@dataclass(frozen=True)
class Row:
    cells: tuple[str, ...]
    # One optional style tag per cell, in column order.
    styles: tuple[Optional[str], ...] = ()

    def style_for(self, column: int) -> Optional[str]:
        if column < len(self.styles):
            return self.styles[column]
        return None


def format_ms(value: float) -> str:
    return f"{value:.2f} ms"


def latency_rows(samples: Sequence[float]) -> list[Row]:
    rows: list[Row] = []
    for idx, sample in enumerate(samples):
        rows.append(
            Row(
                cells=(str(idx + 1), format_ms(sample), BAR_CHAR * bar_length(sample)),
                styles=(None, None, BAR_STYLES[idx % 2]),
            )
        )
    return rows


def port_status_rows(ports: Sequence[int], statuses: Sequence[bool]) -> list[Row]:
    return [
        Row(cells=(str(port), STATUS_OPEN if is_open else STATUS_NO_RESPONSE))
        for port, is_open in zip(ports, statuses)
    ]


def port_latency_rows(
    ports: Sequence[int], results: Sequence[ConnectResult]
) -> list[Row]:
    rows: list[Row] = []
    for port, res in zip(ports, results):
        if res.ok and res.latency_ms is not None:
            cell = format_ms(res.latency_ms)
        else:
            cell = UNABLE_TO_CONNECT
        rows.append(Row(cells=(str(port), cell)))
    return rows


def format_average(target: str, duration_s: int, average_ms: float) -> str:
    return (
        f"Average response time for {target} over {duration_s} seconds: "
        f"{average_ms:.2f} ms"
    )
