"""Celery tasks for price alert notifications."""

import logging

from src.celery_app import app as celery_app

logger = logging.getLogger(__name__)


@celery_app.task
def notify_price_alert(
    alert_id: str,
    item_id: str,
    user_id: str,
    item_title: str,
    price: str | None,
    reasons: list[str],
) -> dict:
    """Notify a user that one of their price alerts fired.

    Delivery (email, push) is not wired up yet; the event is logged.

    Returns:
        dict describing the notification that would be sent
    """
    message = f"'{item_title}' is now {price}: {'; '.join(reasons)}"
    logger.info("Price alert %s for user %s on item %s: %s", alert_id, user_id, item_id, message)
    return {"alert_id": alert_id, "user_id": user_id, "item_id": item_id, "message": message}
