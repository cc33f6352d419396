from typing import List, Optional, Union

from sqlalchemy import false
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from models.file import FileModel, FileType, ParentSentinel

FileId = Union[int, ParentSentinel]


def _match_id(column, file_id: FileId):
    if file_id is ParentSentinel.NO_MATCH:
        return false()
    if file_id is ParentSentinel.ROOT:
        return column.is_(None)
    return column == file_id


class FileRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(
        self,
        owner_id: int,
        name: str,
        type: FileType,
        parent: FileId,
        is_public: bool = False,
        local_path: Optional[str] = None,
    ) -> FileModel:
        file = FileModel(
            owner_id=owner_id,
            name=name,
            type=type,
            is_public=is_public,
            parent_id=None if parent is ParentSentinel.ROOT else parent,
            local_path=local_path,
        )
        self.db.add(file)
        await self.db.commit()
        await self.db.refresh(file)
        return file

    async def get(self, file_id: FileId) -> Optional[FileModel]:
        if isinstance(file_id, ParentSentinel):
            return None
        return await self.db.get(FileModel, file_id)

    async def get_owned(self, file_id: FileId, owner_id: int) -> Optional[FileModel]:
        if isinstance(file_id, ParentSentinel):
            return None
        result = await self.db.execute(
            select(FileModel)
            .where(FileModel.id == file_id)
            .where(FileModel.owner_id == owner_id)
        )
        return result.scalars().first()

    async def list_owned(self, owner_id: int, parent: FileId, offset: int, limit: int) -> List[FileModel]:
        """Файлы владельца внутри parent, новые первыми"""
        result = await self.db.execute(
            select(FileModel)
            .where(FileModel.owner_id == owner_id)
            .where(_match_id(FileModel.parent_id, parent))
            .order_by(FileModel.id.desc())
            .offset(offset)
            .limit(limit)
        )
        return list(result.scalars().all())

    async def set_public(self, file: FileModel, is_public: bool) -> FileModel:
        file.is_public = is_public
        await self.db.commit()
        await self.db.refresh(file)
        return file

    async def rollback(self) -> None:
        await self.db.rollback()
