"""Wishlist item operations, including price history tracking."""

import logging
from typing import Any

from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from src.config import get_settings
from src.models.item import WishlistItem
from src.models.mixins import utcnow
from src.models.wishlist import Wishlist
from src.services.errors import (
    ConflictError,
    InvalidInputError,
    NotFoundError,
    UnauthorizedError,
)
from src.services.price_alert_service import PriceAlertService
from src.services.pricing import append_price_history
from src.services.privacy import ensure_can_view

logger = logging.getLogger(__name__)

ITEM_FIELDS = {
    "title",
    "url",
    "affiliate_url",
    "image",
    "price",
    "description",
    "priority",
    "notes",
    "item_type",
    "category",
    "tags",
    "size",
    "quantity",
}

# The source URL is fixed once an item exists
UPDATABLE_FIELDS = ITEM_FIELDS - {"url"}

# Columns that may be changed but never cleared
REQUIRED_FIELDS = {"title", "priority"}

DEFAULT_TITLE = "Untitled"


class ItemService:
    """Service for items within a wishlist."""

    def __init__(self, db: Session, price_alert_service: PriceAlertService | None = None):
        self.db = db
        self.settings = get_settings()
        self.price_alert_service = price_alert_service or PriceAlertService(db)

    def list_items(self, wishlist_id: str) -> list[WishlistItem]:
        """Items of a wishlist in display order, then by priority and newest first."""
        return (
            self.db.query(WishlistItem)
            .filter(WishlistItem.wishlist_id == wishlist_id)
            .order_by(
                WishlistItem.display_order,
                WishlistItem.priority.desc(),
                WishlistItem.created_at.desc(),
            )
            .all()
        )

    def get_item(self, item_id: str) -> WishlistItem:
        item = self.db.query(WishlistItem).filter(WishlistItem.id == item_id).first()
        if not item:
            raise NotFoundError("Item not found")
        return item

    def get_item_for_viewer(self, item_id: str, viewer_id: str | None) -> WishlistItem:
        """Fetch an item, applying its wishlist's privacy rules for ``viewer_id``."""
        item = self.get_item(item_id)
        ensure_can_view(item.wishlist.privacy, item.wishlist.user_id, viewer_id)
        return item

    def add_item(self, wishlist_id: str, user_id: str, fields: dict[str, Any]) -> WishlistItem:
        """Add an item to a wishlist owned by ``user_id``."""
        wishlist = self.db.query(Wishlist).filter(Wishlist.id == wishlist_id).first()
        if not wishlist:
            raise NotFoundError("Wishlist not found")
        if wishlist.user_id != user_id:
            raise UnauthorizedError("You can only add items to your own wishlists")

        unknown = set(fields) - ITEM_FIELDS
        if unknown:
            raise InvalidInputError(f"Unknown item fields: {', '.join(sorted(unknown))}")
        if not fields.get("url"):
            raise InvalidInputError("URL is required")

        values = {key: value for key, value in fields.items() if value is not None}
        values["title"] = (values.get("title") or "").strip() or DEFAULT_TITLE

        item = WishlistItem(wishlist_id=wishlist_id, user_id=user_id, **values)
        if item.price:
            item.price_history = append_price_history(
                None, item.price, utcnow(), self.settings.price_history_limit
            )

        self.db.add(item)
        self.db.commit()
        self.db.refresh(item)
        return item

    def update_item(self, item_id: str, user_id: str, changes: dict[str, Any]) -> WishlistItem:
        """Update an item owned by ``user_id``.

        A new, different, non-empty price is appended to the price history and
        the item's price alerts are checked. Alert failures are logged and do
        not fail the update.
        """
        item = self.get_owned_item(item_id, user_id)

        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise InvalidInputError(f"Cannot update item fields: {', '.join(sorted(unknown))}")
        cleared = REQUIRED_FIELDS & {field for field, value in changes.items() if value is None}
        if cleared:
            raise InvalidInputError(f"Item fields cannot be empty: {', '.join(sorted(cleared))}")

        old_price = item.price
        new_price = changes.get("price")
        for field, value in changes.items():
            setattr(item, field, value)

        price_changed = bool(new_price) and new_price != old_price
        if price_changed:
            item.price_history = append_price_history(
                item.price_history, new_price, utcnow(), self.settings.price_history_limit
            )

        self._commit(item)

        if price_changed:
            self._check_price_alerts(item)
        return item

    def delete_item(self, item_id: str, user_id: str) -> None:
        item = self.get_owned_item(item_id, user_id)
        self.db.delete(item)
        self.db.commit()

    def reorder_items(
        self, wishlist_id: str, user_id: str, item_ids: list[str]
    ) -> list[WishlistItem]:
        """Set display order to match ``item_ids``."""
        wishlist = self.db.query(Wishlist).filter(Wishlist.id == wishlist_id).first()
        if not wishlist:
            raise NotFoundError("Wishlist not found")
        if wishlist.user_id != user_id:
            raise UnauthorizedError("You can only reorder your own wishlists")

        items = {item.id: item for item in self.list_items(wishlist_id)}
        missing = [item_id for item_id in item_ids if item_id not in items]
        if missing:
            raise InvalidInputError(f"Items not in this wishlist: {', '.join(missing)}")

        for position, item_id in enumerate(item_ids):
            items[item_id].display_order = position

        try:
            self.db.commit()
        except StaleDataError as e:
            self.db.rollback()
            raise ConflictError("Items were modified by someone else, please retry") from e
        return self.list_items(wishlist_id)

    def get_owned_item(self, item_id: str, user_id: str) -> WishlistItem:
        item = self.get_item(item_id)
        if item.wishlist.user_id != user_id:
            logger.warning("User %s tried to modify item %s they don't own", user_id, item_id)
            raise UnauthorizedError("You don't own this item")
        return item

    def _commit(self, item: WishlistItem) -> None:
        try:
            self.db.commit()
        except StaleDataError as e:
            self.db.rollback()
            raise ConflictError("Item was modified by someone else, please retry") from e
        self.db.refresh(item)

    def _check_price_alerts(self, item: WishlistItem) -> None:
        try:
            self.price_alert_service.evaluate(item)
        except Exception:
            self.db.rollback()
            logger.exception("Price alert evaluation failed for item %s", item.id)
