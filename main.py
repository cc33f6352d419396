from fastapi import FastAPI
from contextlib import asynccontextmanager
import logging

from config.settings import settings
from config.context import open_context
from exceptions import register_error_handlers
from auth.router import router as auth_router
from files.router import router as files_router
from status.router import router as status_router

# Настройка логгера
logging.basicConfig(level=settings.LOG_LEVEL.upper())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Обработчик событий жизненного цикла приложения"""
    try:
        async with open_context(settings) as context:
            app.state.context = context
            yield  # Приложение работает
    except Exception as e:
        logger.error(f"Startup error: {str(e)}")
        raise


app = FastAPI(
    title="Files Manager API",
    version="1.0.0",
    lifespan=lifespan
)
register_error_handlers(app)

# Подключение роутеров
app.include_router(status_router)
app.include_router(auth_router)
app.include_router(files_router)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL
    )
