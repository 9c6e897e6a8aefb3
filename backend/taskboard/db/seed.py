import asyncio
import logging

from taskboard.core.columns.service import ensure_default_columns
from taskboard.db.session import create_engine, create_sessionmaker, create_tables, get_session
from taskboard.logging_setup import setup_logging
from taskboard.settings import get_settings

logger = logging.getLogger(__name__)


async def seed() -> None:
    settings = get_settings()
    engine = create_engine(settings)
    try:
        await create_tables(engine)
        async with get_session(create_sessionmaker(engine)) as db:
            created = await ensure_default_columns(db)
        if created:
            logger.info("Created columns: %s", ", ".join(c.name for c in created))
        else:
            logger.info("Columns exist, nothing to seed")
    finally:
        await engine.dispose()


if __name__ == "__main__":
    setup_logging(get_settings().LOG_LEVEL)
    asyncio.run(seed())
