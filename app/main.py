import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api.router import api_router
from app.config import settings
from app.core.db import engine
from app.core.errors import register_exception_handlers
from app.core.logging import setup_logging
from app.db.seed import init_db

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    if settings.DB_INIT_ON_STARTUP:
        logger.info("Initializing database schema and seed data")
        await init_db(engine)
    yield
    # Возвращаем соединения пула при остановке
    await engine.dispose()


def create_app() -> FastAPI:
    """Сборка приложения: обработчики ошибок, роутеры"""
    app = FastAPI(
        title=settings.APP_TITLE,
        description="CRUD API для документов",
        version=settings.APP_VERSION,
        lifespan=lifespan,
    )

    register_exception_handlers(app)

    # Подключаем роутеры
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=8000)
