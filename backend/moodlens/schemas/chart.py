"""Chart geometry schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field


class LineChartIn(BaseModel):
    width: float
    height: float = Field(gt=0)
    axis_width: float = Field(default=0, ge=0)
    top_margin: float = Field(default=0, ge=0)


class PieChartIn(BaseModel):
    cx: float
    cy: float
    radius: float


class PointOut(BaseModel):
    label: str
    x: float


class GridLineOut(BaseModel):
    value: int
    y: float


class PieArcOut(BaseModel):
    label: str
    color: str
    count: int
    start_angle: float
    sweep: float
    large_arc: bool
    path: str
    label_x: float
    label_y: float
