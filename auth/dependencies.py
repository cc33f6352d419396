from typing import Optional

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from config.context import AppContext, get_context
from config.database import get_db
from exceptions import Unauthorized
from models.user import User
from .identity import resolve
from .sessions import SessionStore


def get_session_store(context: AppContext = Depends(get_context)) -> SessionStore:
    return SessionStore(context.redis, ttl=context.settings.SESSION_TTL)


async def get_current_user(
    x_token: Optional[str] = Header(None),
    db: AsyncSession = Depends(get_db),
    sessions: SessionStore = Depends(get_session_store)
) -> User:
    return await resolve(db, sessions, x_token)


async def get_optional_user(
    x_token: Optional[str] = Header(None),
    db: AsyncSession = Depends(get_db),
    sessions: SessionStore = Depends(get_session_store)
) -> Optional[User]:
    """Как get_current_user, но анонимный запрос допустим"""
    try:
        return await resolve(db, sessions, x_token)
    except Unauthorized:
        return None
