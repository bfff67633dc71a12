"""Shared route dependencies."""

from __future__ import annotations

from datetime import date, datetime, timezone, tzinfo
from zoneinfo import ZoneInfo

from fastapi import Depends

from moodlens.core.config import settings


def display_tz() -> tzinfo:
    """Zone used to bucket record timestamps into calendar days."""
    if settings.display_timezone.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(settings.display_timezone)


def today(tz: tzinfo = Depends(display_tz)) -> date:
    """Wall clock date in the display zone."""
    return datetime.now(tz).date()
