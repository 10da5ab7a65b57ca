"""Price alert management and evaluation."""

import logging
from collections.abc import Callable
from typing import Any

from sqlalchemy.orm import Session

from src.models.item import WishlistItem
from src.models.mixins import utcnow
from src.models.price_alert import PriceAlert
from src.services.errors import InvalidInputError, NotFoundError, UnauthorizedError
from src.services.pricing import parse_price, percent_drop, previous_price
from src.services.privacy import ensure_can_view

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = {"target_price", "percent_drop", "is_active"}

REQUIRED_FIELDS = {"is_active"}

Notifier = Callable[[PriceAlert, WishlistItem, list[str]], Any]


def dispatch_price_alert(alert: PriceAlert, item: WishlistItem, reasons: list[str]) -> None:
    """Queue the notification task for a fired alert."""
    from src.tasks.price_alerts import notify_price_alert

    notify_price_alert.delay(
        alert_id=alert.id,
        item_id=item.id,
        user_id=alert.user_id,
        item_title=item.title,
        price=item.price,
        reasons=reasons,
    )


class PriceAlertService:
    """Service for price alert CRUD and for checking alerts after a price change."""

    def __init__(self, db: Session, notify: Notifier | None = None):
        self.db = db
        self.notify = notify or dispatch_price_alert

    def create_alert(
        self,
        item_id: str,
        user_id: str,
        target_price: str | None = None,
        percent_drop: int | None = None,
    ) -> PriceAlert:
        """Watch ``item_id`` for a target price, a percentage drop, or both."""
        if not target_price and percent_drop is None:
            raise InvalidInputError("Either target_price or percent_drop is required")
        if target_price and parse_price(target_price) is None:
            raise InvalidInputError(f"Could not read a price from '{target_price}'")

        item = self.db.query(WishlistItem).filter(WishlistItem.id == item_id).first()
        if not item:
            raise NotFoundError("Item not found")
        ensure_can_view(item.wishlist.privacy, item.wishlist.user_id, user_id)

        alert = PriceAlert(
            item_id=item_id,
            user_id=user_id,
            target_price=target_price or None,
            percent_drop=percent_drop,
            is_active=True,
        )
        self.db.add(alert)
        self.db.commit()
        self.db.refresh(alert)
        return alert

    def get_alerts(self, item_id: str, user_id: str) -> list[PriceAlert]:
        """Alerts ``user_id`` has registered on ``item_id``."""
        return (
            self.db.query(PriceAlert)
            .filter(PriceAlert.item_id == item_id, PriceAlert.user_id == user_id)
            .order_by(PriceAlert.created_at)
            .all()
        )

    def update_alert(self, alert_id: str, user_id: str, changes: dict[str, Any]) -> PriceAlert:
        alert = self._get_owned_alert(alert_id, user_id)

        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise InvalidInputError(f"Cannot update alert fields: {', '.join(sorted(unknown))}")
        cleared = REQUIRED_FIELDS & {field for field, value in changes.items() if value is None}
        if cleared:
            raise InvalidInputError(f"Alert fields cannot be empty: {', '.join(sorted(cleared))}")

        target_price = changes.get("target_price")
        if target_price and parse_price(target_price) is None:
            raise InvalidInputError(f"Could not read a price from '{target_price}'")

        for field, value in changes.items():
            setattr(alert, field, value)

        if not alert.target_price and alert.percent_drop is None:
            self.db.rollback()
            raise InvalidInputError("Either target_price or percent_drop is required")

        self.db.commit()
        self.db.refresh(alert)
        return alert

    def delete_alert(self, alert_id: str, user_id: str) -> None:
        alert = self._get_owned_alert(alert_id, user_id)
        self.db.delete(alert)
        self.db.commit()

    def evaluate(self, item: WishlistItem) -> list[PriceAlert]:
        """Check the item's active alerts against its current price.

        Returns the alerts that fired. A target price fires when the current
        price is at or below it; a percent drop fires when the drop from the
        previous history entry meets the threshold. Either one is enough.
        """
        current = parse_price(item.price)
        if current is None:
            logger.debug("Item %s price %r is not numeric, skipping alerts", item.id, item.price)
            return []

        alerts = (
            self.db.query(PriceAlert)
            .filter(PriceAlert.item_id == item.id, PriceAlert.is_active.is_(True))
            .all()
        )
        if not alerts:
            return []

        previous = parse_price(previous_price(item.price_history))
        drop = percent_drop(previous, current) if previous is not None else None

        fired: list[tuple[PriceAlert, list[str]]] = []
        for alert in alerts:
            reasons = []

            target = parse_price(alert.target_price)
            if target is not None and current.amount <= target.amount:
                reasons.append(f"price {item.price} is at or below target {alert.target_price}")

            if alert.percent_drop is not None and drop is not None and drop >= alert.percent_drop:
                reasons.append(f"price dropped {drop:.1f}% (threshold {alert.percent_drop}%)")

            if reasons:
                fired.append((alert, reasons))

        if not fired:
            return []

        now = utcnow()
        for alert, _ in fired:
            alert.last_notified_at = now
        self.db.commit()

        for alert, reasons in fired:
            logger.info(
                "Price alert %s fired for item %s: %s", alert.id, item.id, "; ".join(reasons)
            )
            try:
                self.notify(alert, item, reasons)
            except Exception:
                logger.exception("Failed to dispatch price alert %s", alert.id)

        return [alert for alert, _ in fired]

    def _get_owned_alert(self, alert_id: str, user_id: str) -> PriceAlert:
        alert = self.db.query(PriceAlert).filter(PriceAlert.id == alert_id).first()
        if not alert:
            raise NotFoundError("Price alert not found")
        if alert.user_id != user_id:
            raise UnauthorizedError("You don't own this price alert")
        return alert
