"""FastAPI application entry point."""

import logging

from fastapi import FastAPI

from app import __version__
from app.api import breakers, diff, health
from app.config import settings

logging.basicConfig(level=settings.log_level.upper())

app = FastAPI(
    title="Study Diff Service",
    description="Structural comparison of power-system study snapshots",
    version=__version__,
    debug=settings.debug,
)

app.include_router(health.router, tags=["health"])
app.include_router(diff.router, prefix="/diff", tags=["diff"])
app.include_router(breakers.router, prefix="/breakers", tags=["breakers"])
