import asyncio
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from taskboard.db.session import create_engine, create_sessionmaker, create_tables, get_session
from taskboard.main import create_app
from taskboard.settings import Settings


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return Settings(
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'taskboard.db'}",
        UPLOAD_DIR=str(tmp_path / "media"),
        APP_DEBUG=False,
        LOG_LEVEL="WARNING",
    )


@pytest.fixture()
def run_db(settings: Settings):
    """Run ``fn(db)`` in its own session and transaction against the test database."""
    def _run(fn):
        async def main():
            engine = create_engine(settings)
            try:
                await create_tables(engine)
                async with get_session(create_sessionmaker(engine)) as db:
                    return await fn(db)
            finally:
                await engine.dispose()
        return asyncio.run(main())
    return _run


@pytest.fixture()
def client(settings: Settings):
    with TestClient(create_app(settings)) as c:
        yield c
