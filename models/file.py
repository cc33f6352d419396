import enum
from datetime import datetime, timezone

from sqlalchemy import Boolean, CheckConstraint, Column, DateTime, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from config.database import Base


class FileType(str, enum.Enum):
    folder = "folder"
    file = "file"
    image = "image"

    @property
    def has_content(self) -> bool:
        return self is not FileType.folder

    @property
    def needs_thumbnail(self) -> bool:
        return self is FileType.image


class ParentSentinel(enum.Enum):
    """Особые значения parentId, не являющиеся id файла"""
    ROOT = 0        # верхний уровень, родителя нет
    NO_MATCH = -1   # некорректный id: запрос не находит ничего


class FileModel(Base):
    __tablename__ = "files"
    __table_args__ = (
        CheckConstraint(
            "(type = 'folder') = (local_path IS NULL)",
            name="ck_files_local_path_iff_content",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    name = Column(String, nullable=False)
    type = Column(Enum(FileType, name="file_type"), nullable=False)
    is_public = Column(Boolean, default=False, nullable=False)
    # NULL означает корень; существование родителя не проверяется
    parent_id = Column(Integer, index=True, nullable=True)
    local_path = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    owner = relationship("User", back_populates="files")

    @property
    def parent(self):
        return ParentSentinel.ROOT if self.parent_id is None else self.parent_id
