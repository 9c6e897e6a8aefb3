"""Entity Store: create / fetch / list / update for any entity model.

Records are returned as stored, with no reference expansion. Ordering of
``list_entities`` is creation order.
"""
from typing import Any, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.db.base import Base

E = TypeVar("E", bound=Base)


async def create_entity(db: AsyncSession, model: type[E], fields: dict[str, Any]) -> E:
    entity = model(**fields)
    db.add(entity)
    await db.flush()
    await db.refresh(entity)
    return entity


async def get_entity(db: AsyncSession, model: type[E], entity_id: str) -> E | None:
    result = await db.execute(select(model).where(model.id == entity_id))
    return result.scalar_one_or_none()


async def get_entities(db: AsyncSession, model: type[E], entity_ids: list[str]) -> dict[str, E]:
    if not entity_ids:
        return {}
    result = await db.execute(select(model).where(model.id.in_(list(dict.fromkeys(entity_ids)))))
    return {e.id: e for e in result.scalars().all()}


async def list_entities(db: AsyncSession, model: type[E]) -> list[E]:
    result = await db.execute(select(model).order_by(model.created_at, model.seq))
    return list(result.scalars().all())


async def count_entities(db: AsyncSession, model: type[E]) -> int:
    result = await db.execute(select(func.count()).select_from(model))
    return result.scalar_one()


async def update_entity(db: AsyncSession, entity: E, fields: dict[str, Any]) -> E:
    for field, value in fields.items():
        setattr(entity, field, value)
    await db.flush()
    await db.refresh(entity)
    return entity
