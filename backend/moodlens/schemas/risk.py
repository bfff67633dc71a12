"""Risk series schemas."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field

from moodlens.schemas.chart import GridLineOut, LineChartIn, PointOut
from moodlens.schemas.week import MondayDate


class DailyRiskIn(BaseModel):
    day: str | None = None
    value: float


class RiskWeekIn(BaseModel):
    week_number: int | None = None
    week_start_date: date
    week_end_date: date | None = None
    daily_risks: list[DailyRiskIn] = Field(default_factory=list)
    average_risk: float | None = None


class RiskWeeksPayload(BaseModel):
    """Backend ``/weekly-risk`` response body."""

    weeks: list[RiskWeekIn] = Field(default_factory=list)


class RiskChartRequest(RiskWeeksPayload):
    week_start: MondayDate
    today: date | None = None
    chart: LineChartIn | None = None


class RiskPointOut(BaseModel):
    index: int
    day: str
    value: float
    x: float
    y: float


class RiskChartResponse(BaseModel):
    week_start: date
    week_end: date
    label: str
    average_risk: float | None
    has_data: bool
    dates: list[date]
    axis: list[PointOut]
    points: list[RiskPointOut]
    polyline: str
    grid: list[GridLineOut]
