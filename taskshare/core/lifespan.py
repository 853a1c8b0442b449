"""Application lifespan: startup and shutdown.

Only wiring of infrastructure (logging, optional table creation, DB engine dispose).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from taskshare.core.config import get_settings
from taskshare.infrastructure.persistence import database
from taskshare.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit dispose the SQL engine."""
    settings = get_settings()
    setup_logging()

    if settings.database_create_all:
        await database.create_all()
        logger.info("Database tables created (DATABASE_CREATE_ALL)")

    yield

    await database.dispose_engine()
    logger.info("Database engine disposed")
