"""Chart geometry tests."""

import math
from datetime import date, datetime, timezone

import pytest

from moodlens.services.chart_service import (
    LineChartLayout,
    axis_labels,
    fmt,
    grid_lines,
    line_points,
    pie_slices,
    polyline,
)
from moodlens.services.mood_service import DailyMoodRecord, MoodSlice, aggregate_week
from moodlens.services.week_service import WEEKDAY_LABELS

# inner height 100 keeps the arithmetic readable
LAYOUT = LineChartLayout(width=332, height=112, axis_width=32, top_margin=12)


def test_value_to_y_scale():
    assert LAYOUT.inner_height == 100
    assert LAYOUT.value_to_y(0) == 112
    assert LAYOUT.value_to_y(100) == 12
    assert LAYOUT.value_to_y(50) == 62


def test_step_uses_full_week_length():
    """Mon-Wed of a 7-slot week sit where Mon-Wed sit on the axis."""
    points = line_points([(0, 52), (1, 60), (2, 38)], 7, LAYOUT)
    assert [p.x for p in points] == [32, 82, 132]
    assert [p.y for p in points] == pytest.approx([60, 52, 74])
    assert LAYOUT.step(7) == 50
    assert LAYOUT.step(3) != LAYOUT.step(7)


def test_polyline_string():
    points = line_points([(0, 52), (1, 60), (2, 38)], 7, LAYOUT)
    assert polyline(points) == "32,60 82,52 132,74"
    assert polyline([]) == ""


def test_single_slot_has_zero_step():
    points = line_points([(0, 40)], 1, LAYOUT)
    assert points[0].x == 32


def test_unmeasured_canvas_yields_nothing():
    layout = LineChartLayout(width=0, height=112, axis_width=32, top_margin=12)
    assert line_points([(0, 52)], 7, layout) == []
    assert axis_labels(WEEKDAY_LABELS, layout) == []
    assert grid_lines(layout) == []


def test_axis_labels_cover_every_day():
    labels = axis_labels(WEEKDAY_LABELS, LAYOUT)
    assert [a.label for a in labels] == list(WEEKDAY_LABELS)
    assert [a.x for a in labels] == [32, 82, 132, 182, 232, 282, 332]


def test_grid_lines():
    grid = grid_lines(LAYOUT)
    assert [g.value for g in grid] == [0, 25, 50, 75, 100]
    assert [g.y for g in grid] == [112, 87, 62, 37, 12]


@pytest.mark.parametrize("value, expected", [(100.0, "100"), (20.004, "20"), (10.5, "10.5"), (-0.001, "0"), (1.23456, "1.23")])
def test_fmt(value, expected):
    assert fmt(value) == expected


def _distribution(*labels):
    records = [DailyMoodRecord(label, datetime(2024, 1, 2, 12, tzinfo=timezone.utc)) for label in labels]
    return aggregate_week(records, date(2024, 1, 1), timezone.utc)


def test_pie_three_happy_one_sad():
    dist = _distribution("Happy", "Happy", "Happy", "Sad")
    arcs = pie_slices(dist.slices, 100, 100, 80)

    assert [a.label for a in arcs] == ["Happy", "Sad"]
    assert [a.sweep for a in arcs] == [270, 90]
    assert arcs[0].large_arc is True
    assert arcs[1].large_arc is False
    assert arcs[0].start_angle == -90
    assert arcs[1].start_angle == 180
    assert arcs[0].path == "M 100 100 L 100 20 A 80 80 0 1 1 20 100 Z"
    assert arcs[1].path == "M 100 100 L 20 100 A 80 80 0 0 1 100 20 Z"


def test_pie_label_anchor_on_mid_angle():
    dist = _distribution("Happy", "Happy", "Happy", "Sad")
    happy = pie_slices(dist.slices, 100, 100, 80)[0]
    offset = 0.55 * 80 * math.cos(math.radians(45))
    assert happy.label_x == pytest.approx(100 + offset)
    assert happy.label_y == pytest.approx(100 + offset)


def test_pie_single_slice_is_full_circle():
    dist = _distribution("Tired", "Tired")
    arcs = pie_slices(dist.slices, 100, 100, 80)

    assert len(arcs) == 1
    assert arcs[0].sweep == 360
    assert arcs[0].path.count("A ") == 2
    assert arcs[0].path == "M 100 20 A 80 80 0 1 1 100 180 A 80 80 0 1 1 100 20 Z"


def test_pie_skips_zero_slices_and_empty_input():
    slices = [MoodSlice("Happy", "#34D399", 0), MoodSlice("Sad", "#9CA3AF", 2), MoodSlice("Angry", "#F87171", 2)]
    arcs = pie_slices(slices, 50, 50, 40)
    assert [a.label for a in arcs] == ["Sad", "Angry"]
    assert sum(a.sweep for a in arcs) == pytest.approx(360)
    assert arcs[-1].end_angle == pytest.approx(270)

    assert pie_slices([MoodSlice("Happy", "#34D399", 0)], 50, 50, 40) == []
    assert pie_slices(slices, 50, 50, 0) == []
