import logging
from sqlalchemy.ext.asyncio import AsyncSession
from taskboard.core.users.models import User
from taskboard.core.users.schemas import UserCreate, UserUpdate
from taskboard.core.validation import validate_required
from taskboard.db import store

logger = logging.getLogger(__name__)


async def create_user(db: AsyncSession, data: UserCreate) -> User:
    fields = data.model_dump()
    validate_required("user", fields)
    user = await store.create_entity(db, User, fields)
    logger.info("User created id=%s name=%s", user.id, user.name)
    return user


async def get_user(db: AsyncSession, user_id: str) -> User | None:
    return await store.get_entity(db, User, user_id)


async def list_users(db: AsyncSession) -> list[User]:
    return await store.list_entities(db, User)


async def update_user(db: AsyncSession, user_id: str, data: UserUpdate) -> User | None:
    fields = data.model_dump(exclude_unset=True)
    validate_required("user", fields, partial=True)
    user = await store.get_entity(db, User, user_id)
    if user is None:
        return None
    return await store.update_entity(db, user, fields)
