"""
Health check API endpoints.

Routes: GET /health, GET /health/db

Dependencies: fastapi, sqlalchemy, admin_panel.boundary
System role: Health check HTTP API
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from admin_panel.boundary.db import get_async_db
from admin_panel.models.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(
        success=True,
        message="Server is running successfully",
        timestamp=datetime.now(timezone.utc),
    )


@router.get("/db", response_model=HealthResponse)
async def health_check_db(db: AsyncSession = Depends(get_async_db)):
    """Database health check; 503 while the store is unreachable."""
    try:
        await db.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError):
        logger.exception("Database health check failed")
        body = HealthResponse(
            success=False,
            message="Database unreachable",
            timestamp=datetime.now(timezone.utc),
        )
        return JSONResponse(status_code=503, content=body.model_dump(mode="json"))

    return HealthResponse(
        success=True,
        message="Database connection OK",
        timestamp=datetime.now(timezone.utc),
    )
