import re
from typing import Optional, Union

from pydantic import BaseModel

from models.file import FileModel, ParentSentinel

_LEADING_INT = re.compile(r"^\s*(-?)([0-9]+)")
# Максимальное значение INTEGER в БД: не длиннее 10 цифр
MAX_ID = 2 ** 31 - 1
MAX_DIGITS = 10
_ID = re.compile(r"^[0-9]{1,%d}$" % MAX_DIGITS)


class FileCreate(BaseModel):
    """Тело POST /files; обязательность полей проверяет конвейер загрузки"""
    name: Optional[str] = None
    type: Optional[str] = None
    parentId: Union[int, str, None] = None
    isPublic: bool = False
    data: Optional[str] = None


class FileOut(BaseModel):
    id: int
    userId: int
    name: str
    type: str
    isPublic: bool
    parentId: int

    @classmethod
    def from_model(cls, file: FileModel) -> "FileOut":
        parent = file.parent
        return cls(
            id=file.id,
            userId=file.owner_id,
            name=file.name,
            type=file.type.value,
            isPublic=file.is_public,
            parentId=parent.value if parent is ParentSentinel.ROOT else parent,
        )


def parse_file_id(value) -> Union[int, ParentSentinel]:
    """Некорректный id превращается в NO_MATCH: запрос просто ничего не найдет"""
    if isinstance(value, bool):
        return ParentSentinel.NO_MATCH
    if isinstance(value, str) and _ID.match(value):
        value = int(value)
    if isinstance(value, int) and 0 < value <= MAX_ID:
        return value
    return ParentSentinel.NO_MATCH


def parse_parent_id(value) -> Union[int, ParentSentinel]:
    if value is None or value == 0 or value == "0":
        return ParentSentinel.ROOT
    return parse_file_id(value)


def parse_page(value: Optional[str]) -> int:
    """Ведущее целое из строки, иначе 0"""
    match = _LEADING_INT.match(value or "")
    if not match:
        return 0
    sign, digits = match.groups()
    # Слишком длинное число заведомо за пределами данных
    page = int(digits) if len(digits) <= MAX_DIGITS else MAX_ID + 1
    return -page if sign else page
