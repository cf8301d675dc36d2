from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from hostprobe.stats import average_latency, is_high_latency


class ProbeConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    target: str = Field(..., min_length=1)
    duration_s: int = Field(..., ge=1)


class ResolvedAddress(BaseModel):
    ip: str


class PortResult(BaseModel):
    port: int = Field(..., ge=1, le=65535)
    open: bool
    # Measured by a separate connect attempt, so it may disagree with `open`.
    connect_latency_ms: Optional[float] = None


class ReachabilityReport(BaseModel):
    config: ProbeConfig
    samples: List[float] = Field(default_factory=list)
    addresses: List[ResolvedAddress] = Field(default_factory=list)
    resolution_error: Optional[str] = None
    ports: List[PortResult] = Field(default_factory=list)

    @property
    def average_ms(self) -> float | None:
        if not self.samples:
            return None
        return average_latency(self.samples)

    @property
    def high_latency(self) -> bool:
        average = self.average_ms
        return average is not None and is_high_latency(average)
