#!/usr/bin/env python3
"""Create database tables from SQLAlchemy models.

Handy for a throwaway SQLite database. create_all() only creates missing
tables; schema changes on existing databases go through Alembic.

Usage:
    cd api
    python -m scripts.create_tables
"""

import asyncio
import sys

# Add parent directory to path so we can import from core
sys.path.insert(0, str(__file__).rsplit("/scripts", 1)[0])

from core.database import create_all_tables, create_engine, dispose_engine
from core.logger import configure_logging, get_logger

configure_logging()
logger = get_logger(__name__)


async def create_tables() -> None:
    """Create all database tables defined in models."""
    engine = create_engine()
    logger.info("tables.create.started")
    try:
        await create_all_tables(engine)
    finally:
        await dispose_engine(engine)
    logger.info("tables.create.completed")


if __name__ == "__main__":
    asyncio.run(create_tables())
