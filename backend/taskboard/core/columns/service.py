import logging
from sqlalchemy.ext.asyncio import AsyncSession
from taskboard.core.columns.models import BoardColumn
from taskboard.core.columns.schemas import ColumnCreate, ColumnUpdate
from taskboard.core.validation import validate_required
from taskboard.db import store

logger = logging.getLogger(__name__)

DEFAULT_COLUMNS = ("To do", "In progress", "Done")


async def create_column(db: AsyncSession, data: ColumnCreate) -> BoardColumn:
    fields = data.model_dump()
    validate_required("column", fields)
    column = await store.create_entity(db, BoardColumn, fields)
    logger.info("Column created id=%s name=%s", column.id, column.name)
    return column


async def get_column(db: AsyncSession, column_id: str) -> BoardColumn | None:
    return await store.get_entity(db, BoardColumn, column_id)


async def list_columns(db: AsyncSession) -> list[BoardColumn]:
    return await store.list_entities(db, BoardColumn)


async def update_column(db: AsyncSession, column_id: str, data: ColumnUpdate) -> BoardColumn | None:
    fields = data.model_dump(exclude_unset=True)
    validate_required("column", fields, partial=True)
    column = await store.get_entity(db, BoardColumn, column_id)
    if column is None:
        return None
    return await store.update_entity(db, column, fields)


async def ensure_default_columns(db: AsyncSession) -> list[BoardColumn]:
    """Create the default board columns when no column exists yet."""
    if await store.count_entities(db, BoardColumn):
        return []
    return [await create_column(db, ColumnCreate(name=name)) for name in DEFAULT_COLUMNS]
