"""Конвейер загрузки и правила доступа к файлам.

Метаданные (показ, список, публикация) видны только владельцу. Признак
is_public открывает другим пользователям и анонимам лишь содержимое файла,
и закрытый чужой файл выглядит для них как несуществующий.
"""
import base64
import binascii
import logging
import mimetypes
from pathlib import Path
from typing import List, Optional, Tuple

from exceptions import BadRequest, InternalError, NotFound, ValidationError
from models.file import FileModel, FileType, ParentSentinel
from models.user import User
from .queue import JobQueue
from .repository import FileId, FileRepository
from .schemas import MAX_ID, FileCreate, parse_parent_id
from .storage import ContentStore

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"


def validate_upload(payload: FileCreate) -> Tuple[str, FileType, FileId, Optional[bytes]]:
    if not payload.name:
        raise ValidationError("Missing name")
    try:
        file_type = FileType(payload.type)
    except ValueError:
        raise ValidationError("Missing type")

    parent = parse_parent_id(payload.parentId)
    if parent is ParentSentinel.NO_MATCH:
        raise ValidationError("Invalid parentId")

    content = None
    if file_type.has_content:
        if not payload.data:
            raise ValidationError("Missing data")
        try:
            content = base64.b64decode(payload.data)
        except (binascii.Error, ValueError):
            raise ValidationError("Invalid data")
    return payload.name, file_type, parent, content


async def upload(
    payload: FileCreate,
    user: User,
    repository: FileRepository,
    store: ContentStore,
    thumbnails: JobQueue,
) -> FileModel:
    """Validate -> содержимое на диск -> метаданные в БД -> задача миниатюры.

    Записанный на диск файл не удаляется: если запись в БД не удалась, он остается без метаданных.
    """
    name, file_type, parent, content = validate_upload(payload)

    local_path = None
    try:
        if file_type.has_content:
            local_path = store.write(content)
        file = await repository.create(
            owner_id=user.id,
            name=name,
            type=file_type,
            parent=parent,
            is_public=payload.isPublic,
            local_path=local_path,
        )
    except Exception as e:
        await repository.rollback()
        logger.error(f"Upload failed for user {user.id}: {str(e)}", exc_info=True)
        raise InternalError()
    logger.info(f"User {user.id} uploaded {file_type.value} {file.id}")

    if file_type.needs_thumbnail:
        await thumbnails.add_task(
            label=f"Image thumbnail [{user.id}-{file.id}]",
            user_id=user.id,
            file_id=file.id,
        )
    return file


async def show(file_id: FileId, user: User, repository: FileRepository) -> FileModel:
    file = await repository.get_owned(file_id, user.id)
    if not file:
        raise NotFound()
    return file


async def index(
    user: User,
    repository: FileRepository,
    parent: FileId,
    page: int,
    page_size: int,
) -> List[FileModel]:
    # Страницы за пределами данных (в т.ч. отрицательные) пусты
    if page < 0 or page > MAX_ID:
        return []
    return await repository.list_owned(user.id, parent, offset=page * page_size, limit=page_size)


async def set_published(file_id: FileId, user: User, repository: FileRepository, is_public: bool) -> FileModel:
    file = await show(file_id, user, repository)
    return await repository.set_public(file, is_public)


def can_read_content(file: FileModel, user: Optional[User]) -> bool:
    return file.is_public or (user is not None and file.owner_id == user.id)


async def locate_content(
    file_id: FileId,
    user: Optional[User],
    repository: FileRepository,
    store: ContentStore,
    size: Optional[str] = None,
) -> Tuple[Path, str]:
    """Путь к содержимому и его Content-Type с учетом прав доступа"""
    file = await repository.get(file_id)
    if not file or not can_read_content(file, user):
        raise NotFound()
    if not file.type.has_content:
        raise BadRequest("A folder doesn't have content")
    if size is not None and not (size.isascii() and size.isdigit()):
        raise NotFound()

    file_path = store.locate(file.local_path, size)
    if file_path is None:
        raise NotFound()
    content_type = mimetypes.guess_type(file.name)[0] or DEFAULT_CONTENT_TYPE
    return file_path, content_type
