from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import FileResponse
from sqlalchemy.ext.asyncio import AsyncSession

from auth.dependencies import get_current_user, get_optional_user
from config.context import AppContext, get_context
from config.database import get_db
from models.user import User
from . import service
from .queue import JobQueue, get_thumbnail_queue
from .repository import FileRepository
from .schemas import FileCreate, FileOut, parse_file_id, parse_page, parse_parent_id
from .storage import ContentStore, get_content_store

router = APIRouter(prefix="/files", tags=["files"])


def get_repository(db: AsyncSession = Depends(get_db)) -> FileRepository:
    return FileRepository(db)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=FileOut, summary="Create a file, folder or image")
async def post_upload(
    payload: FileCreate,
    user: User = Depends(get_current_user),
    repository: FileRepository = Depends(get_repository),
    store: ContentStore = Depends(get_content_store),
    thumbnails: JobQueue = Depends(get_thumbnail_queue)
):
    file = await service.upload(payload, user, repository, store, thumbnails)
    return FileOut.from_model(file)


@router.get("", response_model=List[FileOut], summary="List own files")
async def get_index(
    parentId: Optional[str] = Query(None),
    page: Optional[str] = Query(None),
    user: User = Depends(get_current_user),
    repository: FileRepository = Depends(get_repository),
    context: AppContext = Depends(get_context)
):
    """Страница из PAGE_SIZE файлов внутри parentId, новые первыми"""
    files = await service.index(
        user,
        repository,
        parent=parse_parent_id(parentId),
        page=parse_page(page),
        page_size=context.settings.PAGE_SIZE,
    )
    return [FileOut.from_model(file) for file in files]


@router.get("/{file_id}", response_model=FileOut, summary="Show an owned file")
async def get_show(
    file_id: str,
    user: User = Depends(get_current_user),
    repository: FileRepository = Depends(get_repository)
):
    file = await service.show(parse_file_id(file_id), user, repository)
    return FileOut.from_model(file)


@router.put("/{file_id}/publish", response_model=FileOut, summary="Make a file public")
async def put_publish(
    file_id: str,
    user: User = Depends(get_current_user),
    repository: FileRepository = Depends(get_repository)
):
    file = await service.set_published(parse_file_id(file_id), user, repository, True)
    return FileOut.from_model(file)


@router.put("/{file_id}/unpublish", response_model=FileOut, summary="Make a file private")
async def put_unpublish(
    file_id: str,
    user: User = Depends(get_current_user),
    repository: FileRepository = Depends(get_repository)
):
    file = await service.set_published(parse_file_id(file_id), user, repository, False)
    return FileOut.from_model(file)


@router.get("/{file_id}/data", summary="Download file content")
async def get_file(
    file_id: str,
    size: Optional[str] = Query(None),
    user: Optional[User] = Depends(get_optional_user),
    repository: FileRepository = Depends(get_repository),
    store: ContentStore = Depends(get_content_store)
):
    """Содержимое файла; токен не обязателен для публичных файлов"""
    file_path, content_type = await service.locate_content(
        parse_file_id(file_id), user, repository, store, size=size or None
    )
    return FileResponse(file_path, media_type=content_type)
