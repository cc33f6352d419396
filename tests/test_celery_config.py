from config.celery_config import THUMBNAIL_TASK, WELCOME_TASK, make_celery
from config.settings import Settings


def test_broker_defaults_to_redis_url():
    celery = make_celery(Settings(REDIS_URL="redis://cache:6379/3"))

    assert celery.conf.broker_url == "redis://cache:6379/3"


def test_explicit_broker_wins():
    celery = make_celery(Settings(REDIS_URL="redis://cache:6379/3", CELERY_BROKER_URL="redis://broker:6379/1"))

    assert celery.conf.broker_url == "redis://broker:6379/1"


def test_tasks_are_routed_to_worker_queues():
    settings = Settings(THUMBNAIL_QUEUE="thumbs", WELCOME_QUEUE="mail")
    celery = make_celery(settings)

    assert celery.conf.task_routes == {
        THUMBNAIL_TASK: {"queue": "thumbs"},
        WELCOME_TASK: {"queue": "mail"},
    }
    assert {q.name for q in celery.conf.task_queues} == {"thumbs", "mail"}
    assert celery.conf.task_ignore_result is True
