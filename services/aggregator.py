"""Daily aggregation of hourly power readings."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Dict, Iterable, List

from models.records import PowerReading

HOURS_PER_DAY = 24


@dataclass
class DaySummary:
    """Statistics for the readings that share one calendar date."""

    day: date
    minimum: float
    maximum: float
    total: float
    average: float = 0.0


class DailyAggregator:
    """Pure aggregation component that can be unit tested in isolation."""

    def aggregate_by_day(self, readings: Iterable[PowerReading]) -> List[DaySummary]:
        """Group readings by calendar date, in order of first appearance.

        The average always divides by ``HOURS_PER_DAY``, so a day with fewer
        than 24 readings reports an average below its minimum.
        """
        summaries: Dict[date, DaySummary] = {}

        for reading in readings:
            day = reading.timestamp.date()
            value = float(reading.kilo_watt)

            summary = summaries.get(day)
            if summary is None:
                summaries[day] = DaySummary(day=day, minimum=value, maximum=value, total=value)
                continue

            summary.total += value
            if value < summary.minimum:
                summary.minimum = value
            if value > summary.maximum:
                summary.maximum = value

        for summary in summaries.values():
            summary.average = summary.total / HOURS_PER_DAY

        return list(summaries.values())
