import logging

from fastapi import APIRouter, Depends
from sqlalchemy import func, text
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from config.context import AppContext, get_context
from config.database import get_db
from models.file import FileModel
from models.user import User

router = APIRouter(tags=["status"])
logger = logging.getLogger(__name__)


@router.get("/status", summary="Состояние Redis и БД")
async def get_status(
    context: AppContext = Depends(get_context),
    db: AsyncSession = Depends(get_db)
):
    redis_alive = True
    try:
        await context.redis.ping()
    except Exception as e:
        logger.error(f"Redis is not reachable: {str(e)}")
        redis_alive = False

    db_alive = True
    try:
        await db.execute(text("SELECT 1"))
    except Exception as e:
        logger.error(f"Database is not reachable: {str(e)}")
        db_alive = False

    return {"redis": redis_alive, "db": db_alive}


@router.get("/stats", summary="Количество пользователей и файлов")
async def get_stats(db: AsyncSession = Depends(get_db)):
    users = await db.scalar(select(func.count()).select_from(User))
    files = await db.scalar(select(func.count()).select_from(FileModel))
    return {"users": users, "files": files}
