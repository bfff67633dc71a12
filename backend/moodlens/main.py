"""moodlens FastAPI application."""

from __future__ import annotations

import logging

from fastapi import FastAPI

from moodlens.api import health, moods, risk, weeks
from moodlens.core.config import settings

app = FastAPI(
    title=settings.app_name,
    debug=settings.debug,
)

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

app.include_router(health.router)
app.include_router(weeks.router)
app.include_router(moods.router)
app.include_router(risk.router)
