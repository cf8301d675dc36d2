from __future__ import annotations

import math
from typing import Sequence

HIGH_LATENCY_THRESHOLD_MS = 200.0
BAR_UNIT_MS = 10.0


def average_latency(samples: Sequence[float]) -> float:
    if not samples:
        raise ValueError("average_latency requires at least one sample")
    return sum(samples) / len(samples)


def is_high_latency(average_ms: float) -> bool:
    return average_ms > HIGH_LATENCY_THRESHOLD_MS


def bar_length(latency_ms: float) -> int:
    if not math.isfinite(latency_ms) or latency_ms <= 0:
        return 0
    return int(math.floor(latency_ms / BAR_UNIT_MS))
