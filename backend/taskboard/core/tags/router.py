from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from taskboard.core.envelope import Envelope, ok
from taskboard.core.tags import service
from taskboard.core.tags.schemas import TagCreate, TagRead, TagUpdate
from taskboard.dependencies import get_db

router = APIRouter(tags=["tags"])


@router.get("/tags", response_model=Envelope[list[TagRead]])
async def list_tags(db: AsyncSession = Depends(get_db)):
    return ok(await service.list_tags(db))


@router.post("/tags", response_model=Envelope[TagRead], status_code=201)
async def create_tag(data: TagCreate, db: AsyncSession = Depends(get_db)):
    return ok(await service.create_tag(db, data))


@router.get("/tags/{tag_id}", response_model=Envelope[TagRead])
async def get_tag(tag_id: str, db: AsyncSession = Depends(get_db)):
    tag = await service.get_tag(db, tag_id)
    if not tag:
        raise HTTPException(404, "Tag not found")
    return ok(tag)


@router.put("/tags/{tag_id}", response_model=Envelope[TagRead])
async def update_tag(tag_id: str, data: TagUpdate, db: AsyncSession = Depends(get_db)):
    tag = await service.update_tag(db, tag_id, data)
    if not tag:
        raise HTTPException(404, "Tag not found")
    return ok(tag)
