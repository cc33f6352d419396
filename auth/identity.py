import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from exceptions import Unauthorized
from models.user import User, get_user, get_user_by_id
from .sessions import SessionStore
from .utils import generate_token, verify_password

logger = logging.getLogger(__name__)


async def authenticate(db: AsyncSession, sessions: SessionStore, email: str, password: str) -> str:
    """Проверяет учетные данные и выдает новый токен сессии.

    Отсутствующий пользователь и неверный пароль неразличимы для клиента.
    """
    user = await get_user(db, email)
    if not user or not verify_password(password, user.password_hash):
        raise Unauthorized()

    token = generate_token()
    await sessions.set(token, user.id)
    logger.info(f"User {user.id} signed in")
    return token


async def resolve(db: AsyncSession, sessions: SessionStore, token: Optional[str]) -> User:
    """Возвращает владельца токена или Unauthorized"""
    if not token:
        raise Unauthorized()
    user_id = await sessions.get(token)
    if user_id is None:
        raise Unauthorized()
    user = await get_user_by_id(db, user_id)
    if user is None:
        raise Unauthorized()
    return user


async def revoke(sessions: SessionStore, token: str) -> None:
    await sessions.delete(token)
