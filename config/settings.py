import os
import tempfile
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Основные настройки приложения
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    LOG_LEVEL: str = "info"
    FOLDER_PATH: str = os.path.join(tempfile.gettempdir(), "files_manager")
    PAGE_SIZE: int = 20

    # Сессии: токен живёт сутки
    SESSION_TTL: int = 24 * 60 * 60

    # Настройки PostgreSQL (для Docker)
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_HOST: str = "postgres"
    POSTGRES_PORT: str = "5432"
    POSTGRES_DB: str = "files_manager"
    DATABASE_URI: Optional[str] = None

    # Настройки Redis (для Docker)
    REDIS_URL: str = "redis://redis:6379/0"
    CELERY_BROKER_URL: Optional[str] = None  # по умолчанию REDIS_URL
    THUMBNAIL_QUEUE: str = "thumbnail_generation"
    WELCOME_QUEUE: str = "email_sending"

    @property
    def DATABASE_URL(self) -> str:
        if self.DATABASE_URI:
            return self.DATABASE_URI
        return f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"


settings = Settings()
