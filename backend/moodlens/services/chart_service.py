"""Chart geometry: line chart points and pie chart arc paths."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from moodlens.core.moods import RISK_MAX
from moodlens.services.mood_service import MoodSlice

DEFAULT_TICKS: tuple[int, ...] = (0, 25, 50, 75, 100)

# Count labels sit this far out from the centre, as a fraction of the radius
LABEL_RADIUS_FACTOR = 0.55


@dataclass(frozen=True)
class LineChartLayout:
    """Canvas measurements for a 0-100 line chart."""

    width: float
    height: float
    axis_width: float = 0.0  # reserved on the left for tick labels
    top_margin: float = 0.0

    @property
    def inner_height(self) -> float:
        return self.height - self.top_margin

    @property
    def is_measured(self) -> bool:
        return self.width > 0

    def value_to_y(self, value: float) -> float:
        """0 maps to the bottom edge, 100 to the top margin."""
        return self.top_margin + self.inner_height - (value / RISK_MAX) * self.inner_height

    def step(self, slots: int) -> float:
        """Horizontal distance between adjacent slots."""
        if slots <= 1:
            return 0.0
        return (self.width - self.axis_width) / (slots - 1)

    def x_at(self, index: int, slots: int) -> float:
        return self.axis_width + self.step(slots) * index


@dataclass(frozen=True)
class ChartPoint:
    x: float
    y: float


@dataclass(frozen=True)
class AxisLabel:
    label: str
    x: float


@dataclass(frozen=True)
class GridLine:
    value: int
    y: float


@dataclass(frozen=True)
class PieArc:
    """One wedge of a pie chart."""

    label: str
    color: str
    count: int
    start_angle: float  # degrees, -90 is 12 o'clock
    sweep: float  # degrees, clockwise
    path: str
    label_x: float
    label_y: float

    @property
    def end_angle(self) -> float:
        return self.start_angle + self.sweep

    @property
    def large_arc(self) -> bool:
        return self.sweep > 180


def fmt(value: float) -> str:
    """Compact number for path data: at most 2 decimals, no trailing zeros."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def line_points(
    points: Iterable[tuple[int, float]],
    slots: int,
    layout: LineChartLayout,
) -> list[ChartPoint]:
    """Map ``(index, value)`` pairs to canvas coordinates.

    ``slots`` is the length of the full week, so a series missing its future
    days still lines up with the weekday axis. Returns [] until the canvas is
    measured.
    """
    if not layout.is_measured or slots <= 0:
        return []
    return [ChartPoint(x=layout.x_at(i, slots), y=layout.value_to_y(v)) for i, v in points]


def polyline(points: Sequence[ChartPoint]) -> str:
    """SVG ``points`` attribute, e.g. ``"32,40 80,52"``."""
    return " ".join(f"{fmt(p.x)},{fmt(p.y)}" for p in points)


def axis_labels(labels: Sequence[str], layout: LineChartLayout) -> list[AxisLabel]:
    """x positions for every slot label, including days without data."""
    if not layout.is_measured:
        return []
    slots = len(labels)
    return [AxisLabel(label=label, x=layout.x_at(i, slots)) for i, label in enumerate(labels)]


def grid_lines(layout: LineChartLayout, ticks: Iterable[int] = DEFAULT_TICKS) -> list[GridLine]:
    if not layout.is_measured:
        return []
    return [GridLine(value=t, y=layout.value_to_y(t)) for t in ticks]


def _polar(cx: float, cy: float, radius: float, angle: float) -> tuple[float, float]:
    rad = math.radians(angle)
    return cx + radius * math.cos(rad), cy + radius * math.sin(rad)


def _full_circle_path(cx: float, cy: float, r: float) -> str:
    # A single arc command cannot describe 360 degrees; draw two half circles.
    top = f"{fmt(cx)} {fmt(cy - r)}"
    bottom = f"{fmt(cx)} {fmt(cy + r)}"
    return f"M {top} A {fmt(r)} {fmt(r)} 0 1 1 {bottom} A {fmt(r)} {fmt(r)} 0 1 1 {top} Z"


def _wedge_path(cx: float, cy: float, r: float, start: float, end: float) -> str:
    sx, sy = _polar(cx, cy, r, start)
    ex, ey = _polar(cx, cy, r, end)
    large = 1 if end - start > 180 else 0
    return (
        f"M {fmt(cx)} {fmt(cy)} L {fmt(sx)} {fmt(sy)} "
        f"A {fmt(r)} {fmt(r)} 0 {large} 1 {fmt(ex)} {fmt(ey)} Z"
    )


def pie_slices(slices: Iterable[MoodSlice], cx: float, cy: float, radius: float) -> list[PieArc]:
    """Partition the circle clockwise from 12 o'clock by slice count.

    Zero-count slices get no wedge. A lone non-zero slice is drawn as a full
    circle.
    """
    if radius <= 0:
        return []
    filled = [s for s in slices if s.count > 0]
    total = sum(s.count for s in filled)
    if total == 0:
        return []

    arcs: list[PieArc] = []
    start = -90.0
    for s in filled:
        sweep = s.count / total * 360
        if len(filled) == 1:
            path = _full_circle_path(cx, cy, radius)
        else:
            path = _wedge_path(cx, cy, radius, start, start + sweep)
        lx, ly = _polar(cx, cy, radius * LABEL_RADIUS_FACTOR, start + sweep / 2)
        arcs.append(
            PieArc(
                label=s.label,
                color=s.color,
                count=s.count,
                start_angle=start,
                sweep=sweep,
                path=path,
                label_x=lx,
                label_y=ly,
            )
        )
        start += sweep
    return arcs
