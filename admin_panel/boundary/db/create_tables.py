"""
Database table creation.

Issues one CREATE TABLE IF NOT EXISTS per resource table, so it is safe
to run on every process start.

Dependencies: sqlalchemy, admin_panel.configs
System role: Database schema initialization

Usage:
    python -m admin_panel.boundary.db.create_tables
"""

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.schema import CreateTable

from admin_panel.boundary.db.base import Base
from admin_panel.boundary.db.connection import create_async_engine_from_settings
from admin_panel.configs import get_settings

# Import all models to register them with Base.metadata
from admin_panel.boundary.db.models.project_model import ProjectModel  # noqa: F401
from admin_panel.boundary.db.models.mentor_review_model import MentorReviewModel  # noqa: F401

logger = logging.getLogger(__name__)


async def create_all_tables(engine: AsyncEngine) -> list[str]:
    """
    Create all resource tables that do not exist yet.

    Idempotent: existing tables and their rows remain unchanged.

    Args:
        engine: Async engine bound to the store

    Returns:
        list[str]: Names of the tables ensured, in creation order

    Raises:
        SQLAlchemyError: If the store is unreachable or rejects the DDL
    """
    ensured = []
    async with engine.begin() as conn:
        for table in Base.metadata.sorted_tables:
            await conn.execute(CreateTable(table, if_not_exists=True))
            ensured.append(table.name)
            logger.debug("Table ensured", extra={"table": table.name})
    logger.info("Database schema ready", extra={"tables": ensured})
    return ensured


async def drop_all_tables(engine: AsyncEngine) -> None:
    """
    Drop all resource tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.

    Raises:
        SQLAlchemyError: If database connection fails or drop fails
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.warning("All tables dropped")


async def _main() -> None:
    engine = create_async_engine_from_settings(get_settings().database)
    try:
        tables = await create_all_tables(engine)
        print(f"Tables ready: {', '.join(tables)}")
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(_main())
