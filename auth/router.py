import logging
from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException, Request, Response, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from config.database import get_db
from exceptions import Unauthorized, ValidationError
from files.queue import JobQueue, get_welcome_queue
from models.user import User, get_user
from .dependencies import get_current_user, get_session_store
from .identity import authenticate, resolve, revoke
from .sessions import SessionStore
from .utils import get_password_hash

router = APIRouter(tags=["auth"])
logger = logging.getLogger(__name__)

basic_scheme = HTTPBasic(auto_error=False)


async def get_basic_credentials(request: Request) -> Optional[HTTPBasicCredentials]:
    """Некорректный Basic-заголовок равносилен его отсутствию"""
    try:
        return await basic_scheme(request)
    except HTTPException:
        return None


# Модели запросов
class UserCreate(BaseModel):
    """Модель для регистрации пользователя"""
    email: Optional[str] = None
    password: Optional[str] = None


class UserOut(BaseModel):
    email: str
    id: int


class TokenOut(BaseModel):
    token: str


# Эндпоинты
@router.post("/users", status_code=status.HTTP_201_CREATED, response_model=UserOut)
async def register(
    user_data: UserCreate,
    db: AsyncSession = Depends(get_db),
    welcome: JobQueue = Depends(get_welcome_queue)
):
    """Регистрация нового пользователя"""
    if not user_data.email:
        raise ValidationError("Missing email")
    if not user_data.password:
        raise ValidationError("Missing password")

    # Проверяем, существует ли пользователь
    if await get_user(db, user_data.email):
        raise ValidationError("User already exists")

    new_user = User(
        email=user_data.email,
        password_hash=get_password_hash(user_data.password),
    )
    db.add(new_user)
    await db.commit()
    await db.refresh(new_user)
    logger.info(f"Registered user {new_user.id}")

    await welcome.add_task(user_id=new_user.id)
    return UserOut(email=new_user.email, id=new_user.id)


@router.get("/users/me", response_model=UserOut)
async def get_me(user: User = Depends(get_current_user)):
    return UserOut(email=user.email, id=user.id)


@router.get("/connect", response_model=TokenOut)
async def connect(
    credentials: Optional[HTTPBasicCredentials] = Depends(get_basic_credentials),
    db: AsyncSession = Depends(get_db),
    sessions: SessionStore = Depends(get_session_store)
):
    """Аутентификация по Basic-заголовку и выдача токена"""
    if credentials is None:
        raise Unauthorized()
    token = await authenticate(db, sessions, credentials.username, credentials.password)
    return TokenOut(token=token)


@router.get("/disconnect", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def disconnect(
    x_token: Optional[str] = Header(None),
    db: AsyncSession = Depends(get_db),
    sessions: SessionStore = Depends(get_session_store)
):
    user = await resolve(db, sessions, x_token)
    await revoke(sessions, x_token)
    logger.info(f"User {user.id} signed out")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
