"""Mood distribution schemas."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, Field

from moodlens.schemas.chart import PieArcOut, PieChartIn
from moodlens.schemas.week import MondayDate


class MoodEntryIn(BaseModel):
    """Mood entry as returned by the backend diary endpoints."""

    mood_type: str | None = None
    created_at: str | None = None
    activities: list[str] = Field(default_factory=list)
    note: str | None = None


class MoodWeekRequest(BaseModel):
    week_start: MondayDate
    entries: list[MoodEntryIn] = Field(default_factory=list, max_length=5000)
    chart: PieChartIn | None = None


class MoodSliceOut(BaseModel):
    label: str
    color: str
    count: int
    percentage: float


class MoodWeekResponse(BaseModel):
    week_start: date
    week_end: date
    label: str
    total: int
    slices: list[MoodSliceOut]
    arcs: list[PieArcOut]


class MoodDayRequest(BaseModel):
    day: date
    entries: list[MoodEntryIn] = Field(default_factory=list, max_length=5000)


class MoodEntryOut(BaseModel):
    mood_type: str
    created_at: datetime | None
    day: date
    color: str
    activities: list[str]
    note: str
