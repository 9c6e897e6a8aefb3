from datetime import date, datetime
from pydantic import BaseModel, ConfigDict, Field
from taskboard.core.columns.schemas import ColumnRead, ColumnRef
from taskboard.core.tags.schemas import TagRead, TagRef
from taskboard.core.users.schemas import UserRead, UserRef


class TaskCreate(BaseModel):
    """Task payload as submitted: tags, assignee and column are raw ids."""
    model_config = ConfigDict(populate_by_name=True)
    title: str | None = None
    description: str | None = None
    link: str | None = None
    tags: list[str] | None = None
    due_date: date | None = Field(None, alias="dueDate")
    assignee: str | None = None
    column: str | None = None
    comments: list[str] | None = None

class TaskUpdate(TaskCreate):
    pass


class TaskRead(BaseModel):
    """Stored task with the reference snapshots taken at write time."""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
    id: str
    title: str
    description: str
    link: str
    due_date: date | None = Field(alias="dueDate")
    tags: list[TagRef]
    assignee: UserRef | None
    column: ColumnRef | None
    comments: list[str] | None
    created_at: datetime
    updated_at: datetime


class TaskView(TaskRead):
    """Task with its references replaced by the current Tag/User/Column records."""
    tags: list[TagRead]
    assignee: UserRead | None
    column: ColumnRead | None
