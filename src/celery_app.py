"""Celery application configuration."""

from celery import Celery
from celery.signals import setup_logging

from src.config import get_settings
from src.logging_config import configure_logging

settings = get_settings()

app = Celery(
    "wishlist",
    broker=settings.redis_url,
    backend=settings.redis_url,
    include=["src.tasks.price_alerts"],
)

# Celery configuration
app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,
    task_track_started=True,
    task_time_limit=60,
    task_soft_time_limit=45,
    task_always_eager=settings.celery_task_always_eager,
    task_ignore_result=True,
)


@setup_logging.connect
def setup_worker_logging(**kwargs):
    """Use the API's log format in workers instead of Celery's default."""
    configure_logging(settings.log_level)
