import logging
from sqlalchemy.ext.asyncio import AsyncSession
from taskboard.core.tasks.models import Task
from taskboard.core.tasks.references import resolve_references
from taskboard.core.tasks.schemas import TaskCreate, TaskUpdate
from taskboard.core.validation import validate_required
from taskboard.db import store

logger = logging.getLogger(__name__)


async def create_task(db: AsyncSession, data: TaskCreate) -> Task:
    fields = data.model_dump()
    validate_required("task", fields)
    if fields["due_date"] is None:
        del fields["due_date"]
    fields.update(await resolve_references(db, fields))
    task = await store.create_entity(db, Task, fields)
    logger.info("Task created id=%s tags=%d assignee=%s", task.id, len(task.tags), bool(task.assignee))
    return task


async def get_task(db: AsyncSession, task_id: str) -> Task | None:
    return await store.get_entity(db, Task, task_id)


async def list_tasks(db: AsyncSession) -> list[Task]:
    return await store.list_entities(db, Task)


async def count_tasks(db: AsyncSession) -> int:
    return await store.count_entities(db, Task)


async def update_task(db: AsyncSession, task_id: str, data: TaskUpdate) -> Task | None:
    """
    Overwrite the fields the caller sent, re-resolving any references among
    them. Returns None when no task has ``task_id``.
    """
    fields = data.model_dump(exclude_unset=True)
    validate_required("task", fields, partial=True)
    task = await store.get_entity(db, Task, task_id)
    if task is None:
        return None
    fields.update(await resolve_references(db, fields))
    task = await store.update_entity(db, task, fields)
    logger.info("Task updated id=%s fields=%s", task.id, sorted(data.model_fields_set))
    return task
