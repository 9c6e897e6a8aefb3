import logging
from sqlalchemy.ext.asyncio import AsyncSession
from taskboard.core.tags.models import Tag
from taskboard.core.tags.schemas import TagCreate, TagUpdate
from taskboard.core.validation import validate_required
from taskboard.db import store

logger = logging.getLogger(__name__)


async def create_tag(db: AsyncSession, data: TagCreate) -> Tag:
    fields = data.model_dump()
    validate_required("tag", fields)
    tag = await store.create_entity(db, Tag, fields)
    logger.info("Tag created id=%s name=%s", tag.id, tag.name)
    return tag


async def get_tag(db: AsyncSession, tag_id: str) -> Tag | None:
    return await store.get_entity(db, Tag, tag_id)


async def list_tags(db: AsyncSession) -> list[Tag]:
    return await store.list_entities(db, Tag)


async def update_tag(db: AsyncSession, tag_id: str, data: TagUpdate) -> Tag | None:
    fields = data.model_dump(exclude_unset=True)
    validate_required("tag", fields, partial=True)
    tag = await store.get_entity(db, Tag, tag_id)
    if tag is None:
        return None
    return await store.update_entity(db, tag, fields)
