import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from taskboard.core.columns.router import router as columns_router
from taskboard.core.envelope import register_exception_handlers
from taskboard.core.tags.router import router as tags_router
from taskboard.core.tasks.router import router as tasks_router
from taskboard.core.users.router import router as users_router
from taskboard.db.session import create_engine, create_sessionmaker, create_tables
from taskboard.logging_setup import setup_logging
from taskboard.settings import Settings, get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    engine = create_engine(settings)
    if settings.DB_CREATE_TABLES:
        await create_tables(engine)
    app.state.engine = engine
    app.state.sessionmaker = create_sessionmaker(engine)
    logger.info("Taskboard API started env=%s", settings.APP_ENV)
    try:
        yield
    finally:
        await engine.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL, settings.LOG_DIR)

    app = FastAPI(
        title="Taskboard API",
        version="0.1.0",
        docs_url="/docs" if settings.APP_DEBUG else None,
        redoc_url="/redoc" if settings.APP_DEBUG else None,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(tasks_router)
    app.include_router(tags_router)
    app.include_router(users_router)
    app.include_router(columns_router)

    upload_dir = Path(settings.UPLOAD_DIR)
    upload_dir.mkdir(parents=True, exist_ok=True)
    app.mount(settings.MEDIA_URL, StaticFiles(directory=upload_dir), name="media")

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app
