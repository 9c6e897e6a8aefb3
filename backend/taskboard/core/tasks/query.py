"""Task list queries: filter, paginate, then expand references.

Filtering and the page window run in the database against the match
text stored on each task. Expansion then looks every referenced
Tag/User/Column up again, so the returned documents are the current
records rather than the snapshots stored on the task.
"""
from dataclasses import dataclass

from sqlalchemy import ColumnElement, select
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.core.columns.models import BoardColumn
from taskboard.core.columns.schemas import ColumnRead
from taskboard.core.tags.models import Tag
from taskboard.core.tags.schemas import TagRead
from taskboard.core.tasks.models import Task
from taskboard.core.tasks.schemas import TaskView
from taskboard.core.users.models import User
from taskboard.core.users.schemas import UserRead
from taskboard.db import store

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 20


@dataclass(frozen=True)
class TaskFilter:
    """Optional case-insensitive substring criteria. ``None`` means no constraint."""
    assignee: str | None = None
    column: str | None = None
    tags: str | None = None

    @classmethod
    def from_params(cls, assignee: str | None = None, column: str | None = None, tags: str | None = None) -> "TaskFilter":
        return cls(assignee=assignee or None, column=column or None, tags=tags or None)

    def criteria(self) -> list[ColumnElement[bool]]:
        clauses = []
        if self.assignee is not None:
            clauses.append(Task.assignee_text.icontains(self.assignee, autoescape=True))
        if self.column is not None:
            clauses.append(Task.column_text.icontains(self.column, autoescape=True))
        if self.tags is not None:
            clauses.append(Task.tags_text.icontains(self.tags, autoescape=True))
        return clauses


def page_window(page: int | None = None, per_page: int | None = None) -> tuple[int, int]:
    """Return (offset, limit). per_page is at least 1 and the offset never negative."""
    page = DEFAULT_PAGE if page is None else int(page)
    per_page = DEFAULT_PER_PAGE if per_page is None else int(per_page)
    limit = max(per_page, 1)
    return max((page - 1) * limit, 0), limit


def _expand(task: Task, tags: dict[str, Tag], users: dict[str, User], columns: dict[str, BoardColumn]) -> TaskView:
    assignee = users.get(task.assignee["id"]) if task.assignee else None
    column = columns.get(task.column["id"]) if task.column else None
    return TaskView(
        id=task.id,
        title=task.title,
        description=task.description,
        link=task.link,
        due_date=task.due_date,
        comments=task.comments,
        tags=[TagRead.model_validate(tags[ref["id"]]) for ref in task.tags if ref["id"] in tags],
        assignee=UserRead.model_validate(assignee) if assignee else None,
        column=ColumnRead.model_validate(column) if column else None,
        created_at=task.created_at,
        updated_at=task.updated_at,
    )


async def expand_tasks(db: AsyncSession, tasks: list[Task]) -> list[TaskView]:
    tag_ids = [ref["id"] for task in tasks for ref in task.tags]
    user_ids = [task.assignee["id"] for task in tasks if task.assignee]
    column_ids = [task.column["id"] for task in tasks if task.column]

    tags = await store.get_entities(db, Tag, tag_ids)
    users = await store.get_entities(db, User, user_ids)
    columns = await store.get_entities(db, BoardColumn, column_ids)
    return [_expand(task, tags, users, columns) for task in tasks]


async def query_tasks(
    db: AsyncSession,
    task_filter: TaskFilter | None = None,
    page: int | None = None,
    per_page: int | None = None,
) -> list[TaskView]:
    offset, limit = page_window(page, per_page)
    stmt = (
        select(Task)
        .where(*(task_filter or TaskFilter()).criteria())
        .order_by(Task.created_at, Task.seq)
        .offset(offset)
        .limit(limit)
    )
    result = await db.execute(stmt)
    return await expand_tasks(db, list(result.scalars().all()))
