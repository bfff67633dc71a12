"""Mood category constants."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MoodCategory:
    """One selectable mood with its chart colour."""

    label: str
    color: str


# Declared order is the on-screen order of pie slices and legend rows
MOOD_PALETTE: tuple[MoodCategory, ...] = (
    MoodCategory("Neutral", "#60A5FA"),
    MoodCategory("Energetic", "#EC4899"),
    MoodCategory("Happy", "#34D399"),
    MoodCategory("Satisfied", "#FBBF24"),
    MoodCategory("Tired", "#FB923C"),
    MoodCategory("Stressed", "#A78BFA"),
    MoodCategory("Angry", "#F87171"),
    MoodCategory("Sad", "#9CA3AF"),
)

MOOD_LABELS: tuple[str, ...] = tuple(m.label for m in MOOD_PALETTE)

# Unknown or missing labels are counted here
DEFAULT_MOOD = "Neutral"

# Risk scores are percentages
RISK_MAX = 100
