"""Pydantic schemas for the HTTP API layer."""

from __future__ import annotations

import datetime as dt
from typing import List

from pydantic import BaseModel, Field


class Panel(BaseModel):
    """A registered solar panel."""

    serial: str = Field(
        ..., min_length=16, max_length=16, description="Unique 16 character panel serial."
    )
    brand: str = Field(..., min_length=1)
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class HourlyReadingCreate(BaseModel):
    """Payload for recording one hour of generated power."""

    id: int = Field(..., description="Caller supplied reading identifier.")
    kilo_watt: float = Field(..., allow_inf_nan=False)
    date_time: dt.datetime


class HourlyReading(BaseModel):
    """A stored hourly reading, attached to a panel by serial."""

    id: int
    panel_id: str
    kilo_watt: float = Field(..., allow_inf_nan=False)
    date_time: dt.datetime


class HourlyReadingList(BaseModel):
    """All hourly readings recorded for a panel."""

    readings: List[HourlyReading] = Field(default_factory=list)


class DailySummary(BaseModel):
    """Per-day statistics derived from hourly readings."""

    date: dt.date
    minimum: float
    maximum: float
    sum: float
    average: float = Field(..., description="Sum of the day divided by 24 hours.")
