from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession
from taskboard.core.envelope import Envelope, ok
from taskboard.core.tasks import service
from taskboard.core.tasks.query import DEFAULT_PAGE, DEFAULT_PER_PAGE, TaskFilter, query_tasks
from taskboard.core.tasks.schemas import TaskCreate, TaskRead, TaskUpdate, TaskView
from taskboard.dependencies import get_db

router = APIRouter(tags=["tasks"])


@router.get("/tasks", response_model=Envelope[list[TaskView]])
async def list_tasks(
    assignee: str | None = None,
    column: str | None = None,
    tags: str | None = None,
    page: int = DEFAULT_PAGE,
    per_page: int = Query(DEFAULT_PER_PAGE, alias="perPage"),
    db: AsyncSession = Depends(get_db),
):
    task_filter = TaskFilter.from_params(assignee=assignee, column=column, tags=tags)
    return ok(await query_tasks(db, task_filter, page=page, per_page=per_page))


@router.post("/tasks", response_model=Envelope[TaskRead], status_code=201)
async def create_task(data: TaskCreate, db: AsyncSession = Depends(get_db)):
    return ok(await service.create_task(db, data))


@router.get("/tasks/{task_id}", response_model=Envelope[TaskRead])
async def get_task(task_id: str, db: AsyncSession = Depends(get_db)):
    task = await service.get_task(db, task_id)
    if not task:
        raise HTTPException(404, "Task not found")
    return ok(task)


@router.put("/tasks/{task_id}", response_model=Envelope[TaskRead])
async def update_task(task_id: str, data: TaskUpdate, db: AsyncSession = Depends(get_db)):
    task = await service.update_task(db, task_id, data)
    if not task:
        raise HTTPException(404, "Task not found")
    return ok(task)
