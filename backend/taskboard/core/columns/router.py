from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from taskboard.core.envelope import Envelope, ok
from taskboard.core.columns import service
from taskboard.core.columns.schemas import ColumnCreate, ColumnRead, ColumnUpdate
from taskboard.dependencies import get_db

router = APIRouter(tags=["columns"])


@router.get("/columns", response_model=Envelope[list[ColumnRead]])
async def list_columns(db: AsyncSession = Depends(get_db)):
    return ok(await service.list_columns(db))


@router.post("/columns", response_model=Envelope[ColumnRead], status_code=201)
async def create_column(data: ColumnCreate, db: AsyncSession = Depends(get_db)):
    return ok(await service.create_column(db, data))


@router.get("/columns/{column_id}", response_model=Envelope[ColumnRead])
async def get_column(column_id: str, db: AsyncSession = Depends(get_db)):
    column = await service.get_column(db, column_id)
    if not column:
        raise HTTPException(404, "Column not found")
    return ok(column)


@router.put("/columns/{column_id}", response_model=Envelope[ColumnRead])
async def update_column(column_id: str, data: ColumnUpdate, db: AsyncSession = Depends(get_db)):
    column = await service.update_column(db, column_id, data)
    if not column:
        raise HTTPException(404, "Column not found")
    return ok(column)
