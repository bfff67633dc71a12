"""Week and calendar schemas."""

from __future__ import annotations

from datetime import date
from typing import Annotated

from pydantic import AfterValidator, BaseModel


def _require_monday(value: date) -> date:
    if value.weekday() != 0:
        raise ValueError("week_start must be a Monday")
    return value


MondayDate = Annotated[date, AfterValidator(_require_monday)]


class WeekOut(BaseModel):
    week_start: date
    week_end: date
    label: str


class CalendarDayOut(BaseModel):
    iso: str
    label: str
    in_current_month: bool


class MonthOut(BaseModel):
    year: int
    month: int
    weekdays: list[str]
    weeks: list[list[CalendarDayOut]]
