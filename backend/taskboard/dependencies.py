from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.settings import Settings


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    async with request.app.state.sessionmaker() as session:
        async with session.begin():
            yield session


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
