from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool
from taskboard.core.envelope import Envelope, ok
from taskboard.core.files.service import save_image
from taskboard.core.users import service
from taskboard.core.users.schemas import UserCreate, UserRead, UserUpdate
from taskboard.core.validation import validate_required
from taskboard.dependencies import get_app_settings, get_db
from taskboard.settings import Settings

router = APIRouter(tags=["users"])


async def _store_upload(image: UploadFile, settings: Settings) -> str:
    # one byte past the limit is enough to reject oversized files
    content = await image.read(settings.MAX_UPLOAD_BYTES + 1)
    return await run_in_threadpool(
        save_image,
        settings.UPLOAD_DIR,
        settings.MEDIA_URL,
        image.filename,
        image.content_type,
        content,
        settings.MAX_UPLOAD_BYTES,
    )


@router.get("/users", response_model=Envelope[list[UserRead]])
async def list_users(db: AsyncSession = Depends(get_db)):
    return ok(await service.list_users(db))


@router.post("/users", response_model=Envelope[UserRead], status_code=201)
async def create_user(data: UserCreate, db: AsyncSession = Depends(get_db)):
    return ok(await service.create_user(db, data))


@router.post("/users/upload", response_model=Envelope[UserRead], status_code=201)
async def create_user_with_image(
    name: str | None = Form(None),
    description: str | None = Form(None),
    image: UploadFile = File(...),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    # text fields are checked before anything is written to disk
    validate_required("user", {"name": name, "description": description}, partial=True)
    image_url = await _store_upload(image, settings)
    data = UserCreate(name=name, description=description, image_url=image_url)
    return ok(await service.create_user(db, data))


@router.get("/users/{user_id}", response_model=Envelope[UserRead])
async def get_user(user_id: str, db: AsyncSession = Depends(get_db)):
    user = await service.get_user(db, user_id)
    if not user:
        raise HTTPException(404, "User not found")
    return ok(user)


@router.put("/users/{user_id}", response_model=Envelope[UserRead])
async def update_user(user_id: str, data: UserUpdate, db: AsyncSession = Depends(get_db)):
    user = await service.update_user(db, user_id, data)
    if not user:
        raise HTTPException(404, "User not found")
    return ok(user)


@router.put("/users/{user_id}/image", response_model=Envelope[UserRead])
async def update_user_image(
    user_id: str,
    image: UploadFile = File(...),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    if not await service.get_user(db, user_id):
        raise HTTPException(404, "User not found")
    image_url = await _store_upload(image, settings)
    return ok(await service.update_user(db, user_id, UserUpdate(image_url=image_url)))
