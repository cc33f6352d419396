from config.database import Base
from .user import User, get_user, get_user_by_id
from .file import FileModel, FileType, ParentSentinel

__all__ = ['Base', 'User', 'get_user', 'get_user_by_id', 'FileModel', 'FileType', 'ParentSentinel']
