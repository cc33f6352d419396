import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import AsyncIterator

from celery import Celery
from fastapi import Request
from redis.asyncio import Redis
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from .celery_config import make_celery
from .database import Base, create_session_factory
from .settings import Settings

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Клиенты, общие для всех запросов: создаются один раз при старте"""
    settings: Settings
    engine: AsyncEngine
    session_factory: object
    redis: Redis
    celery: Celery


@asynccontextmanager
async def open_context(settings: Settings) -> AsyncIterator[AppContext]:
    """Подключается к БД и Redis, гарантированно закрывая все клиенты"""
    # Таблицы регистрируются в Base.metadata при импорте моделей
    import models  # noqa: F401

    engine = create_async_engine(settings.DATABASE_URL)
    redis = Redis.from_url(
        settings.REDIS_URL,
        encoding="utf-8",
        decode_responses=True,
        socket_connect_timeout=5
    )
    celery = make_celery(settings)
    try:
        storage_path = Path(settings.FOLDER_PATH)
        storage_path.mkdir(exist_ok=True, parents=True)
        logger.info(f"Storage directory ready at: {storage_path.absolute()}")

        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables created successfully")

        try:
            await redis.ping()
            logger.info("Successfully connected to Redis server")
        except Exception as e:
            logger.error(f"Failed to connect to Redis: {str(e)}")
            raise

        yield AppContext(
            settings=settings,
            engine=engine,
            session_factory=create_session_factory(engine),
            redis=redis,
            celery=celery,
        )
    finally:
        celery.close()
        await redis.aclose()
        await engine.dispose()
        logger.info("Application context closed")


def get_context(request: Request) -> AppContext:
    return request.app.state.context
