"""Domain models shared across services."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True)
class PowerReading:
    """One hour of generated power for a panel, as consumed by the aggregator."""

    panel_id: str
    timestamp: datetime
    kilo_watt: float
