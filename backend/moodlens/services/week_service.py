"""Calendar week helpers: Monday-aligned weeks, labels and timestamp parsing."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import TypeVar

DateLike = TypeVar("DateLike", date, datetime)

WEEKDAY_LABELS: tuple[str, ...] = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

_MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_TZ_SUFFIX = re.compile(r"([zZ]|[+-]\d{2}:?\d{2})$")


@dataclass(frozen=True)
class CalendarDay:
    """One cell of a month grid."""

    iso: str
    label: str
    in_current_month: bool


def iso_date(d: date | datetime) -> str:
    """Format the calendar fields of ``d`` as YYYY-MM-DD."""
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def monday_start(d: DateLike) -> DateLike:
    """Return the Monday (at 00:00 for datetimes) of the week containing ``d``."""
    if isinstance(d, datetime):
        d = d.replace(hour=0, minute=0, second=0, microsecond=0)
    return d - timedelta(days=d.weekday())


def week_end(week_start: DateLike) -> DateLike:
    return week_start + timedelta(days=6)


def week_dates(week_start: date) -> list[date]:
    """The seven calendar dates Monday through Sunday."""
    return [week_start + timedelta(days=i) for i in range(7)]


def _day_month(d: date) -> str:
    return f"{d.day} {_MONTH_ABBR[d.month - 1]}"


def week_range_label(week_start: date) -> str:
    """Human readable range, e.g. ``1 Jan - 7 Jan, 2024``.

    Both years are shown when the week crosses a year boundary:
    ``30 Dec 2024 - 5 Jan 2025``.
    """
    end = week_end(week_start)
    if week_start.year != end.year:
        return f"{_day_month(week_start)} {week_start.year} - {_day_month(end)} {end.year}"
    return f"{_day_month(week_start)} - {_day_month(end)}, {end.year}"


def build_week_start_dates(n: int, today: date | None = None) -> list[date]:
    """The ``n`` most recent week starts, oldest first, current week last."""
    if n <= 0:
        return []
    current = monday_start(today or date.today())
    return [current - timedelta(weeks=n - 1 - i) for i in range(n)]


def parse_utc_timestamp(value: str | None) -> datetime | None:
    """Parse a backend timestamp into an aware UTC datetime.

    A space between date and time is accepted and a value without an explicit
    zone is read as UTC. Returns None for empty or unparsable input.
    """
    if not value:
        return None
    normalized = re.sub(r"\s+", "T", value.strip())
    if not normalized:
        return None

    match = _TZ_SUFFIX.search(normalized)
    if match is None:
        normalized += "+00:00"
    else:
        suffix = match.group(1)
        head = normalized[: match.start()]
        if suffix in ("z", "Z"):
            normalized = head + "+00:00"
        elif ":" not in suffix:
            normalized = f"{head}{suffix[:3]}:{suffix[3:]}"

    try:
        parsed = datetime.fromisoformat(normalized)
    except ValueError:
        return None
    return parsed.astimezone(timezone.utc)


def local_date(ts: datetime, tz: tzinfo | None = None) -> date:
    """Calendar date of an instant in ``tz`` (process local zone when None).

    Naive datetimes are taken to be UTC.
    """
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(tz).date()


def month_matrix(year: int, month: int) -> list[list[CalendarDay]]:
    """Six Sunday-first weeks covering ``month``, padded with neighbour days."""
    first = date(year, month, 1)
    lead = (first.weekday() + 1) % 7
    start = first - timedelta(days=lead)

    weeks: list[list[CalendarDay]] = []
    for week in range(6):
        row = []
        for day in range(7):
            d = start + timedelta(days=week * 7 + day)
            row.append(
                CalendarDay(
                    iso=iso_date(d),
                    label=str(d.day),
                    in_current_month=(d.year, d.month) == (year, month),
                )
            )
        weeks.append(row)
    return weeks
