"""Extraction of round-trip samples from raw ping output."""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

_RTT_RE = re.compile(r"time=([\d.]+) ms")


def _to_float(value: str) -> float:
    try:
        return float(value)
    except ValueError:
        logger.debug("Unparseable round-trip value %r, recording 0.0", value)
        return 0.0


def parse_latency_series(raw_output: str) -> list[float]:
    """Return every ``time=<n> ms`` sample in the order it appears.

    An empty list means the probe produced no replies; it is not an error.
    """
    if not raw_output:
        return []
    return [_to_float(match.group(1)) for match in _RTT_RE.finditer(raw_output)]
