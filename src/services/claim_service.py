"""Claim and purchase workflow for wishlist items.

Claim status moves through::

    none -> pending -> confirmed          (owner confirms, no proof)
                    -> rejected           (owner denies, item unclaimed)
                    -> purchased -> confirmed + proof_verified
                                 -> proof_rejected (re-reviewable)

``purchase_item`` is a direct purchase that bypasses the claim steps.
Writes are guarded by the item's version column, so a concurrent change
between the read and the write raises ``ConflictError``.
"""

import logging
from dataclasses import dataclass
from datetime import datetime

from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from src.models.enums import ClaimStatus
from src.models.item import WishlistItem
from src.models.mixins import utcnow
from src.services.errors import ConflictError, InvalidStateError, NotFoundError, UnauthorizedError
from src.services.friendship_service import FriendshipService

logger = logging.getLogger(__name__)


@dataclass
class PurchaseDetails:
    """Proof-of-purchase supplied by a claimer."""

    purchase_proof: str | None = None
    purchase_date: datetime | None = None
    tracking_number: str | None = None
    purchase_notes: str | None = None
    purchase_amount: str | None = None
    is_anonymous: bool = False


class ClaimService:
    """Service for claim/purchase state transitions."""

    def __init__(self, db: Session, friendship_service: FriendshipService | None = None):
        self.db = db
        self.friendship_service = friendship_service or FriendshipService(db)

    def claim(self, item_id: str, user_id: str) -> WishlistItem:
        """Claim an unclaimed item. Owners are not prevented from claiming their own items."""
        item = self._get_item(item_id)
        if item.claim_status != ClaimStatus.NONE:
            raise InvalidStateError(
                f"Item cannot be claimed while its claim status is '{item.claim_status}'"
            )

        item.is_claimed = True
        item.claimed_by = user_id
        item.claim_status = ClaimStatus.PENDING.value
        return self._save(item, "claimed", user_id)

    def unclaim(self, item_id: str, user_id: str | None = None) -> WishlistItem:
        """Reset the claim regardless of its current state."""
        item = self._get_item(item_id)
        item.is_claimed = False
        item.claimed_by = None
        item.claim_status = ClaimStatus.NONE.value
        return self._save(item, "unclaimed", user_id)

    def confirm_claim(self, item_id: str, owner_id: str, confirm: bool) -> WishlistItem:
        """Owner confirms (purchase happened) or rejects a claim."""
        item = self._get_item(item_id)
        self._require_owner(item, owner_id)
        if not item.claimed_by:
            raise InvalidStateError("Item has no claim to confirm")

        if confirm:
            item.claim_status = ClaimStatus.CONFIRMED.value
            item.is_purchased = True
            item.purchased_by = item.claimed_by
            return self._save(item, "claim confirmed", owner_id)

        item.claim_status = ClaimStatus.REJECTED.value
        item.is_claimed = False
        item.claimed_by = None
        return self._save(item, "claim rejected", owner_id)

    def mark_as_purchased(
        self, item_id: str, user_id: str, details: PurchaseDetails | None = None
    ) -> WishlistItem:
        """Claimer reports the purchase, optionally with proof."""
        details = details or PurchaseDetails()
        item = self._get_item(item_id)
        if item.claimed_by != user_id:
            logger.warning("User %s tried to mark unclaimed item %s as purchased", user_id, item_id)
            raise UnauthorizedError(
                "You must have claimed this item to mark it as purchased"
            )

        item.claim_status = ClaimStatus.PURCHASED.value
        item.is_purchased = True
        item.purchased_by = user_id
        item.purchase_proof = details.purchase_proof or None
        item.purchase_date = details.purchase_date
        item.tracking_number = details.tracking_number or None
        item.purchase_notes = details.purchase_notes or None
        item.purchase_amount = details.purchase_amount or None
        item.is_anonymous = bool(details.is_anonymous)
        return self._save(item, "marked purchased", user_id)

    def verify_proof(self, item_id: str, verifier_id: str, verified: bool) -> WishlistItem:
        """Owner or one of the owner's moderators accepts or rejects the proof."""
        item = self._get_item(item_id)
        owner_id = item.wishlist.user_id
        if verifier_id != owner_id and not self.friendship_service.is_moderator(
            verifier_id, owner_id
        ):
            logger.warning("User %s tried to verify proof on item %s", verifier_id, item_id)
            raise UnauthorizedError(
                "You must be the owner or a moderator to verify proof"
            )

        item.proof_verified_at = utcnow()
        item.proof_verified_by = verifier_id
        if verified:
            item.proof_verified = True
            item.proof_rejected = False
            item.claim_status = ClaimStatus.CONFIRMED.value
            item.is_purchased = True
            item.purchased_by = item.claimed_by or item.purchased_by
            return self._save(item, "proof verified", verifier_id)

        # Claim stays as-is so the claimer can resubmit
        item.proof_verified = False
        item.proof_rejected = True
        return self._save(item, "proof rejected", verifier_id)

    def unpurchase_item(self, item_id: str, owner_id: str) -> WishlistItem:
        """Owner clears the purchase; a confirmed item is reopened completely."""
        item = self._get_item(item_id)
        self._require_owner(item, owner_id)

        item.is_purchased = False
        item.purchased_by = None
        if item.claim_status == ClaimStatus.CONFIRMED:
            item.claim_status = ClaimStatus.NONE.value
            item.is_claimed = False
            item.claimed_by = None
        return self._save(item, "unpurchased", owner_id)

    def purchase_item(self, item_id: str, user_id: str) -> WishlistItem:
        """Mark an item purchased directly, outside the claim flow."""
        item = self._get_item(item_id)
        item.is_purchased = True
        item.purchased_by = user_id
        return self._save(item, "purchased directly", user_id)

    def _get_item(self, item_id: str) -> WishlistItem:
        item = self.db.query(WishlistItem).filter(WishlistItem.id == item_id).first()
        if not item:
            raise NotFoundError("Item not found")
        return item

    def _require_owner(self, item: WishlistItem, user_id: str) -> None:
        if item.wishlist.user_id != user_id:
            logger.warning("User %s failed owner check on item %s", user_id, item.id)
            raise UnauthorizedError("You don't own this item")

    def _save(self, item: WishlistItem, event: str, actor_id: str | None) -> WishlistItem:
        try:
            self.db.commit()
        except StaleDataError as e:
            self.db.rollback()
            logger.info("Concurrent update on item %s while %s", item.id, event)
            raise ConflictError("Item was modified by someone else, please retry") from e

        self.db.refresh(item)
        logger.info(
            "Item %s %s by %s (status=%s)", item.id, event, actor_id, item.claim_status
        )
        return item
