"""
Celery Configuration

Producer-side Celery app: this service only publishes jobs, the thumbnail
and e-mail workers consume them.
"""

from celery import Celery
from kombu import Queue

from .settings import Settings

THUMBNAIL_TASK = "files.generate_thumbnail"
WELCOME_TASK = "users.send_welcome_email"


def make_celery(settings: Settings) -> Celery:
    """
    Create the Celery instance publishing to the configured broker.

    Args:
        settings: Application settings

    Returns:
        Configured Celery instance
    """
    celery = Celery("files_manager", broker=settings.CELERY_BROKER_URL or settings.REDIS_URL)
    celery.conf.update(
        task_serializer="json",
        accept_content=["json"],
        timezone="UTC",
        enable_utc=True,
        # Результаты задач не хранятся
        task_ignore_result=True,
        task_routes={
            THUMBNAIL_TASK: {"queue": settings.THUMBNAIL_QUEUE},
            WELCOME_TASK: {"queue": settings.WELCOME_QUEUE},
        },
        task_queues=(
            Queue(settings.THUMBNAIL_QUEUE, routing_key=settings.THUMBNAIL_QUEUE),
            Queue(settings.WELCOME_QUEUE, routing_key=settings.WELCOME_QUEUE),
        ),
    )
    return celery
