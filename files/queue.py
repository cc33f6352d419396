import logging
from typing import Optional

from celery import Celery
from fastapi import Depends
from starlette.concurrency import run_in_threadpool

from config.celery_config import THUMBNAIL_TASK, WELCOME_TASK
from config.context import AppContext, get_context

logger = logging.getLogger(__name__)


class JobQueue:
    """Публикует задачи Celery одного типа; выполняют их внешние воркеры"""

    def __init__(self, celery: Celery, task_name: str):
        self.celery = celery
        self.task_name = task_name

    async def add_task(self, label: Optional[str] = None, **kwargs) -> bool:
        """Fire-and-forget: ошибка брокера не доходит до вызывающего"""
        try:
            await run_in_threadpool(
                self.celery.send_task, self.task_name, kwargs=kwargs, shadow=label
            )
            logger.info(f"Enqueued {self.task_name} task: {kwargs}")
            return True
        except Exception as e:
            logger.error(f"Failed to enqueue {self.task_name} task {kwargs}: {str(e)}")
            return False


def get_thumbnail_queue(context: AppContext = Depends(get_context)) -> JobQueue:
    return JobQueue(context.celery, THUMBNAIL_TASK)


def get_welcome_queue(context: AppContext = Depends(get_context)) -> JobQueue:
    return JobQueue(context.celery, WELCOME_TASK)
