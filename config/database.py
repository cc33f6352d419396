from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession
from sqlalchemy.orm import declarative_base, sessionmaker

# Базовый класс для моделей
Base = declarative_base()


def create_session_factory(engine: AsyncEngine):
    """Фабрика сессий поверх движка из контекста приложения"""
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def get_db(request: Request):
    async with request.app.state.context.session_factory() as session:
        yield session
