"""Reference resolution for task writes.

Raw tag/assignee/column ids submitted with a task are looked up and
replaced by snapshots of the records as they are at that moment. The
snapshots are stored on the task and are not refreshed when the
referenced record changes later; only rewriting the task does that.

Ids that do not resolve are dropped (tags) or stored as null
(assignee, column). They never fail the write.
"""
import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.core.columns.models import BoardColumn
from taskboard.core.columns.schemas import ColumnRef
from taskboard.core.tags.models import Tag
from taskboard.core.tags.schemas import TagRef
from taskboard.core.users.models import User
from taskboard.core.users.schemas import UserRef
from taskboard.db import store

logger = logging.getLogger(__name__)


def reference_text(snapshots: list[dict[str, Any]]) -> str:
    return "\n".join(s["name"] for s in snapshots)


async def resolve_tags(db: AsyncSession, tag_ids: list[str]) -> list[dict[str, Any]]:
    found = await store.get_entities(db, Tag, tag_ids)
    resolved = []
    for tag_id in tag_ids:
        tag = found.get(tag_id)
        if tag is None:
            logger.debug("Dropping unknown tag id=%s", tag_id)
            continue
        resolved.append(TagRef.model_validate(tag).model_dump(mode="json"))
    return resolved


async def resolve_assignee(db: AsyncSession, user_id: str | None) -> dict[str, Any] | None:
    if not user_id:
        return None
    user = await store.get_entity(db, User, user_id)
    if user is None:
        logger.debug("Unknown assignee id=%s, storing task without assignee", user_id)
        return None
    return UserRef.model_validate(user).model_dump(mode="json", by_alias=True)


async def resolve_column(db: AsyncSession, column_id: str | None) -> dict[str, Any] | None:
    if not column_id:
        return None
    column = await store.get_entity(db, BoardColumn, column_id)
    if column is None:
        logger.debug("Unknown column id=%s, storing task without column", column_id)
        return None
    return ColumnRef.model_validate(column).model_dump(mode="json")


async def resolve_references(db: AsyncSession, fields: dict[str, Any]) -> dict[str, Any]:
    """
    Resolve whichever of ``tags``, ``assignee`` and ``column`` are present in
    ``fields`` and return the task columns to write for them: the snapshot
    plus its rendered match text. Keys absent from ``fields`` are left out.
    """
    resolved: dict[str, Any] = {}
    if "tags" in fields:
        tags = await resolve_tags(db, fields["tags"] or [])
        resolved.update(tags=tags, tags_text=reference_text(tags))
    if "assignee" in fields:
        assignee = await resolve_assignee(db, fields["assignee"])
        resolved.update(assignee=assignee, assignee_text=reference_text([assignee] if assignee else []))
    if "column" in fields:
        column = await resolve_column(db, fields["column"])
        resolved.update(column=column, column_text=reference_text([column] if column else []))
    return resolved
