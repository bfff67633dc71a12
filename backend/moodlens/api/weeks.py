"""Week list and month calendar API."""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, Query

from moodlens.api.deps import today
from moodlens.core.config import settings
from moodlens.schemas.week import CalendarDayOut, MonthOut, WeekOut
from moodlens.services.week_service import (
    build_week_start_dates,
    month_matrix,
    week_end,
    week_range_label,
)

router = APIRouter(prefix="/analytics", tags=["weeks"])

_CALENDAR_WEEKDAYS = ["SUN", "MON", "TUE", "WED", "THU", "FRI", "SAT"]


@router.get("/weeks", response_model=list[WeekOut])
def list_weeks(
    count: int | None = Query(default=None, ge=1, le=52),
    current_day: date = Depends(today),
):
    """Most recent week ranges, oldest first. Defaults to HISTORY_WEEKS."""
    starts = build_week_start_dates(count or settings.history_weeks, current_day)
    return [WeekOut(week_start=s, week_end=week_end(s), label=week_range_label(s)) for s in starts]


@router.get("/calendar", response_model=MonthOut)
def get_calendar(
    year: int = Query(ge=2, le=9998),
    month: int = Query(ge=1, le=12),
):
    """Sunday-first 6x7 month grid.

    Years 1 and 9999 are refused: their grids would pad past the supported
    date range.
    """
    weeks = [
        [CalendarDayOut(iso=d.iso, label=d.label, in_current_month=d.in_current_month) for d in row]
        for row in month_matrix(year, month)
    ]
    return MonthOut(year=year, month=month, weekdays=_CALENDAR_WEEKDAYS, weeks=weeks)
