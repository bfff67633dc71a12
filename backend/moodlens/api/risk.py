"""Weekly risk trend API."""

from __future__ import annotations

import logging

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, status

from moodlens.api.deps import today
from moodlens.core.config import settings
from moodlens.schemas.chart import GridLineOut, PointOut
from moodlens.schemas.risk import RiskChartRequest, RiskChartResponse, RiskPointOut
from moodlens.services.chart_service import LineChartLayout, axis_labels, grid_lines, line_points, polyline
from moodlens.services.risk_service import find_week, past_points, series_from_payload
from moodlens.services.week_service import week_dates, week_range_label

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/analytics/risk", tags=["risk"])


def _layout(data: RiskChartRequest) -> LineChartLayout:
    if data.chart is None:
        return LineChartLayout(
            width=settings.chart_width,
            height=settings.chart_height,
            axis_width=settings.chart_axis_width,
            top_margin=settings.chart_top_margin,
        )
    return LineChartLayout(
        width=data.chart.width,
        height=data.chart.height,
        axis_width=data.chart.axis_width,
        top_margin=data.chart.top_margin,
    )


@router.post("/weekly", response_model=RiskChartResponse)
def weekly_risk(data: RiskChartRequest, current_day: date = Depends(today)):
    """Risk trend for one week with future days left off the line."""
    series = find_week(series_from_payload(data), data.week_start)
    if series is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No risk data for week starting {data.week_start.isoformat()}",
        )

    layout = _layout(data)
    slots = len(series.points)
    past = past_points(series, data.today or current_day)
    coords = line_points(((p.index, p.value) for p in past), slots, layout)
    if not coords and past:
        logger.debug("Canvas not measured, skipping line for week %s", series.week_start)

    return RiskChartResponse(
        week_start=series.week_start,
        week_end=series.week_end,
        label=week_range_label(series.week_start),
        average_risk=series.average_risk,
        has_data=bool(past),
        dates=week_dates(series.week_start)[:slots],
        axis=[PointOut(label=a.label, x=a.x) for a in axis_labels([p.day for p in series.points], layout)],
        points=[
            RiskPointOut(index=p.index, day=p.day, value=p.value, x=c.x, y=c.y)
            for p, c in zip(past, coords)
        ],
        polyline=polyline(coords),
        grid=[GridLineOut(value=g.value, y=g.y) for g in grid_lines(layout)],
    )
