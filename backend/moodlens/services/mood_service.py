"""Weekly mood distribution and week history paging."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, replace
from datetime import date, datetime, timedelta, tzinfo
from typing import Any

from moodlens.core.moods import DEFAULT_MOOD, MOOD_LABELS, MOOD_PALETTE
from moodlens.services.week_service import local_date, monday_start, parse_utc_timestamp, week_end

logger = logging.getLogger(__name__)

_CANONICAL_LABELS = {label.lower(): label for label in MOOD_LABELS}


@dataclass(frozen=True)
class DailyMoodRecord:
    """A single logged mood."""

    mood_label: str
    timestamp: datetime  # UTC instant
    activities: tuple[str, ...] = ()
    note: str = ""


@dataclass(frozen=True)
class DiaryEntry:
    """A mood entry as listed in the diary day view."""

    mood_label: str
    created_at: datetime | None  # None when the backend timestamp was unusable
    day: date
    activities: tuple[str, ...] = ()
    note: str = ""


@dataclass(frozen=True)
class MoodSlice:
    label: str
    color: str
    count: int

    def percentage(self, total: int) -> float:
        """Share of ``total`` in percent, one decimal place."""
        if total <= 0:
            return 0.0
        return round(self.count / total * 100, 1)


@dataclass(frozen=True)
class WeeklyMoodDistribution:
    """Mood counts for one Monday-Sunday week, one slice per category."""

    week_start: date
    week_end: date
    slices: tuple[MoodSlice, ...]

    @property
    def total(self) -> int:
        return sum(s.count for s in self.slices)


def normalize_mood_label(label: Any) -> str:
    """Map a raw label onto the fixed category set.

    Matching ignores case and surrounding whitespace; anything else is
    counted as the default mood.
    """
    if label in MOOD_LABELS:
        return label
    if isinstance(label, str):
        canonical = _CANONICAL_LABELS.get(label.strip().lower())
        if canonical is not None:
            return canonical
    logger.debug("Unrecognized mood label %r counted as %s", label, DEFAULT_MOOD)
    return DEFAULT_MOOD


def aggregate_week(
    records: Iterable[DailyMoodRecord],
    week_start: date,
    tz: tzinfo | None = None,
) -> WeeklyMoodDistribution:
    """Count the records falling in the week starting ``week_start``.

    Slices always come back in the declared palette order, zero counts included.
    """
    if isinstance(week_start, datetime):
        week_start = week_start.date()
    end = week_end(week_start)

    counts = dict.fromkeys(MOOD_LABELS, 0)
    for record in records:
        if week_start <= local_date(record.timestamp, tz) <= end:
            counts[normalize_mood_label(record.mood_label)] += 1

    slices = tuple(MoodSlice(label=m.label, color=m.color, count=counts[m.label]) for m in MOOD_PALETTE)
    return WeeklyMoodDistribution(week_start=week_start, week_end=end, slices=slices)


def _activities(item: Mapping[str, Any]) -> tuple[str, ...]:
    raw = item.get("activities")
    if not isinstance(raw, (list, tuple)):
        return ()
    return tuple(str(a) for a in raw)


def records_from_payload(items: Iterable[Mapping[str, Any]]) -> list[DailyMoodRecord]:
    """Build records from backend mood entries (``mood_type``, ``created_at``).

    Entries without a parsable timestamp are skipped.
    """
    records: list[DailyMoodRecord] = []
    for item in items:
        ts = parse_utc_timestamp(item.get("created_at"))
        if ts is None:
            logger.debug("Skipping mood entry with bad created_at: %r", item.get("created_at"))
            continue
        records.append(
            DailyMoodRecord(
                mood_label=normalize_mood_label(item.get("mood_type")),
                timestamp=ts,
                activities=_activities(item),
                note=item.get("note") or "",
            )
        )
    return records


def entries_for_day(
    items: Iterable[Mapping[str, Any]],
    day: date,
    tz: tzinfo | None = None,
) -> list[DiaryEntry]:
    """Backend mood entries logged on ``day`` (local calendar date), in input order.

    An entry whose ``created_at`` cannot be parsed is listed under ``day``.
    """
    entries: list[DiaryEntry] = []
    for item in items:
        ts = parse_utc_timestamp(item.get("created_at"))
        if ts is None:
            logger.debug("Mood entry with bad created_at %r listed under %s", item.get("created_at"), day)
        elif local_date(ts, tz) != day:
            continue
        entries.append(
            DiaryEntry(
                mood_label=normalize_mood_label(item.get("mood_type")),
                created_at=ts,
                day=day,
                activities=_activities(item),
                note=item.get("note") or "",
            )
        )
    return entries


# Returns the records for the week starting at the given Monday, or None when
# there is nothing older to load.
WeekFetcher = Callable[[date], Iterable[DailyMoodRecord] | None]


@dataclass(frozen=True)
class WeekHistory:
    """Loaded weeks, oldest first, plus where the next older page begins."""

    weeks: tuple[WeeklyMoodDistribution, ...]
    next_week_start: date
    exhausted: bool = False


def start_history(today: date, fetch: WeekFetcher, tz: tzinfo | None = None) -> WeekHistory:
    """History holding only the week containing ``today``."""
    if isinstance(today, datetime):
        today = today.date()
    current = monday_start(today)
    records = fetch(current) or ()
    return WeekHistory(
        weeks=(aggregate_week(records, current, tz),),
        next_week_start=current - timedelta(weeks=1),
    )


def load_older_weeks(
    history: WeekHistory,
    fetch: WeekFetcher,
    page_size: int,
    tz: tzinfo | None = None,
) -> WeekHistory:
    """Return a new history with up to ``page_size`` older weeks prepended.

    Weeks already in ``history`` are carried over as the same objects; only
    their position in ``weeks`` changes.
    """
    if history.exhausted or page_size <= 0:
        return history

    older: list[WeeklyMoodDistribution] = []
    start = history.next_week_start
    exhausted = False
    for _ in range(page_size):
        records = fetch(start)
        if records is None:
            exhausted = True
            break
        older.append(aggregate_week(records, start, tz))
        start -= timedelta(weeks=1)

    logger.info("Loaded %d older week(s), exhausted=%s", len(older), exhausted)
    older.reverse()
    return replace(
        history,
        weeks=tuple(older) + history.weeks,
        next_week_start=start,
        exhausted=exhausted,
    )
