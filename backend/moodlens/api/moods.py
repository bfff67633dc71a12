"""Mood distribution and diary day API."""

from __future__ import annotations

import logging
from datetime import tzinfo

from fastapi import APIRouter, Depends

from moodlens.api.deps import display_tz
from moodlens.core.config import settings
from moodlens.core.moods import MOOD_PALETTE
from moodlens.schemas.chart import PieArcOut
from moodlens.schemas.mood import (
    MoodDayRequest,
    MoodEntryOut,
    MoodSliceOut,
    MoodWeekRequest,
    MoodWeekResponse,
)
from moodlens.services.chart_service import pie_slices
from moodlens.services.mood_service import aggregate_week, entries_for_day, records_from_payload
from moodlens.services.week_service import week_range_label

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/analytics/moods", tags=["moods"])

_COLORS = {m.label: m.color for m in MOOD_PALETTE}


@router.post("/weekly", response_model=MoodWeekResponse)
def weekly_moods(data: MoodWeekRequest, tz: tzinfo = Depends(display_tz)):
    """Mood counts for one week plus pie chart wedges."""
    records = records_from_payload(e.model_dump() for e in data.entries)
    dist = aggregate_week(records, data.week_start, tz)
    total = dist.total
    logger.debug("Week %s: %d of %d entries counted", dist.week_start, total, len(data.entries))

    if data.chart is not None:
        cx, cy, radius = data.chart.cx, data.chart.cy, data.chart.radius
    else:
        radius = settings.pie_radius
        cx = cy = radius

    arcs = [
        PieArcOut(
            label=a.label,
            color=a.color,
            count=a.count,
            start_angle=a.start_angle,
            sweep=a.sweep,
            large_arc=a.large_arc,
            path=a.path,
            label_x=a.label_x,
            label_y=a.label_y,
        )
        for a in pie_slices(dist.slices, cx, cy, radius)
    ]
    return MoodWeekResponse(
        week_start=dist.week_start,
        week_end=dist.week_end,
        label=week_range_label(dist.week_start),
        total=total,
        slices=[
            MoodSliceOut(label=s.label, color=s.color, count=s.count, percentage=s.percentage(total))
            for s in dist.slices
        ],
        arcs=arcs,
    )


@router.post("/daily", response_model=list[MoodEntryOut])
def daily_moods(data: MoodDayRequest, tz: tzinfo = Depends(display_tz)):
    """Entries logged on one calendar day, in the order received.

    Entries whose timestamp cannot be read are listed under the requested day.
    """
    return [
        MoodEntryOut(
            mood_type=e.mood_label,
            created_at=e.created_at,
            day=e.day,
            color=_COLORS[e.mood_label],
            activities=list(e.activities),
            note=e.note,
        )
        for e in entries_for_day((e.model_dump() for e in data.entries), data.day, tz)
    ]
