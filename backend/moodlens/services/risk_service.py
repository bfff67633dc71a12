"""Weekly risk series: payload parsing and past-only filtering."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any

from moodlens.schemas.risk import RiskWeeksPayload
from moodlens.services.week_service import WEEKDAY_LABELS, week_end

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DailyRiskPoint:
    day: str  # weekday label
    value: float  # 0-100, not clamped here


@dataclass(frozen=True)
class IndexedRiskPoint:
    """A risk point together with its slot in the full Monday-Sunday week."""

    index: int
    day: str
    value: float


@dataclass(frozen=True)
class WeeklyRiskSeries:
    """Risk readings for one week, ordered Monday to Sunday."""

    week_start: date
    week_end: date
    points: tuple[DailyRiskPoint, ...]
    average_risk: float | None = None
    week_number: int | None = None

    def date_of(self, index: int) -> date:
        return self.week_start + timedelta(days=index)


def average_of(points: Iterable[DailyRiskPoint | IndexedRiskPoint]) -> float | None:
    """Mean value rounded to one decimal, None for no points."""
    values = [p.value for p in points]
    if not values:
        return None
    return round(sum(values) / len(values), 1)


def past_points(series: WeeklyRiskSeries, today: date | None = None) -> list[IndexedRiskPoint]:
    """Points dated on or before ``today`` (wall clock date when None).

    An empty result means the week has not started yet; callers show axes
    only and a "no data" message.
    """
    today = today or date.today()
    return [
        IndexedRiskPoint(index=i, day=p.day, value=p.value)
        for i, p in enumerate(series.points)
        if series.date_of(i) <= today
    ]


def series_from_payload(payload: RiskWeeksPayload | Mapping[str, Any]) -> list[WeeklyRiskSeries]:
    """Convert the backend ``{"weeks": [...]}`` response into series values."""
    if not isinstance(payload, RiskWeeksPayload):
        payload = RiskWeeksPayload.model_validate(payload)

    result: list[WeeklyRiskSeries] = []
    for week in payload.weeks:
        points = tuple(
            DailyRiskPoint(day=r.day or WEEKDAY_LABELS[i % 7], value=r.value)
            for i, r in enumerate(week.daily_risks)
        )
        average = week.average_risk
        if average is None:
            average = average_of(points)
        result.append(
            WeeklyRiskSeries(
                week_start=week.week_start_date,
                week_end=week.week_end_date or week_end(week.week_start_date),
                points=points,
                average_risk=average,
                week_number=week.week_number,
            )
        )
    logger.debug("Parsed %d risk week(s)", len(result))
    return result


def find_week(series_list: Sequence[WeeklyRiskSeries], week_start: date) -> WeeklyRiskSeries | None:
    for series in series_list:
        if series.week_start == week_start:
            return series
    return None
