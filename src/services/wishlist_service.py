"""Wishlist container operations."""

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.config import get_settings
from src.models.enums import Privacy
from src.models.user import User
from src.models.wishlist import Wishlist
from src.services.errors import ConflictError, InvalidInputError, NotFoundError, UnauthorizedError
from src.services.friendship_service import FriendshipService
from src.services.icons import random_icon_and_color
from src.services.privacy import ensure_can_view
from src.services.share_link import generate_unique_share_link

logger = logging.getLogger(__name__)

DEFAULT_WISHLIST_NAME = "My Wishlist"

UPDATABLE_FIELDS = {"name", "description", "privacy", "icon", "color", "is_default"}
REQUIRED_FIELDS = {"name", "privacy", "is_default"}


class WishlistService:
    """Service for creating, reading, updating and deleting wishlists."""

    def __init__(self, db: Session, friendship_service: FriendshipService | None = None):
        self.db = db
        self.settings = get_settings()
        self.friendship_service = friendship_service or FriendshipService(db)

    def get_user_wishlists(self, user_id: str) -> list[Wishlist]:
        """All wishlists owned by ``user_id``, default first, then newest first."""
        return (
            self.db.query(Wishlist)
            .filter(Wishlist.user_id == user_id)
            .order_by(Wishlist.is_default.desc(), Wishlist.created_at.desc())
            .all()
        )

    def get_default_wishlist(self, user_id: str) -> Wishlist:
        """Return the user's default wishlist, creating one if none exists."""
        wishlist = (
            self.db.query(Wishlist)
            .filter(Wishlist.user_id == user_id, Wishlist.is_default.is_(True))
            .first()
        )
        if wishlist:
            return wishlist

        return self.create_wishlist(
            user_id,
            name=DEFAULT_WISHLIST_NAME,
            privacy=Privacy.PUBLIC,
            is_default=True,
        )

    def create_wishlist(
        self,
        user_id: str,
        name: str,
        description: str | None = None,
        privacy: Privacy = Privacy.PUBLIC,
        icon: str | None = None,
        color: str | None = None,
        is_default: bool = False,
    ) -> Wishlist:
        """Create a wishlist with a fresh share link.

        A new default replaces the previous one in the same transaction.
        """
        if self.db.query(User.id).filter(User.id == user_id).first() is None:
            raise NotFoundError("User not found. Please sign in again.")

        if not icon or not color:
            random_icon, random_color = random_icon_and_color()
            icon = icon or random_icon
            color = color or random_color

        share_link = generate_unique_share_link(
            self._share_link_exists, max_attempts=self.settings.share_link_max_attempts
        )

        try:
            if is_default:
                self._unset_default(user_id)

            wishlist = Wishlist(
                name=name,
                description=description,
                user_id=user_id,
                privacy=Privacy(privacy).value,
                share_link=share_link,
                icon=icon,
                color=color,
                is_default=is_default,
            )
            self.db.add(wishlist)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning("Wishlist creation for %s hit a constraint: %s", user_id, e.orig)
            raise ConflictError("Could not create wishlist, please try again") from e

        self.db.refresh(wishlist)
        logger.info(
            "Created wishlist %s (%s) for user %s, default=%s",
            wishlist.id,
            wishlist.share_link,
            user_id,
            is_default,
        )
        return wishlist

    def get_wishlist(self, wishlist_id: str) -> Wishlist:
        wishlist = self.db.query(Wishlist).filter(Wishlist.id == wishlist_id).first()
        if not wishlist:
            raise NotFoundError("Wishlist not found")
        return wishlist

    def get_wishlist_for_viewer(self, wishlist_id: str, viewer_id: str | None) -> Wishlist:
        """Fetch a wishlist by id, applying the privacy rules for ``viewer_id``."""
        wishlist = self.get_wishlist(wishlist_id)
        ensure_can_view(wishlist.privacy, wishlist.user_id, viewer_id)
        return wishlist

    def get_wishlist_by_share_link(self, share_link: str, viewer_id: str | None) -> Wishlist:
        """Fetch a wishlist by share link, applying the same privacy rules as by id."""
        wishlist = self.db.query(Wishlist).filter(Wishlist.share_link == share_link).first()
        if not wishlist:
            raise NotFoundError("Wishlist not found")
        ensure_can_view(wishlist.privacy, wishlist.user_id, viewer_id)
        return wishlist

    def get_owned_wishlist(
        self, wishlist_id: str, user_id: str, action: str = "modify"
    ) -> Wishlist:
        """Fetch a wishlist, requiring ``user_id`` to own it."""
        wishlist = self.get_wishlist(wishlist_id)
        if wishlist.user_id != user_id:
            logger.warning("User %s tried to %s wishlist %s", user_id, action, wishlist_id)
            raise UnauthorizedError(f"You don't have permission to {action} this wishlist")
        return wishlist

    def update_wishlist(self, wishlist_id: str, user_id: str, changes: dict[str, Any]) -> Wishlist:
        """Apply ``changes`` to a wishlist owned by ``user_id``."""
        wishlist = self.get_owned_wishlist(wishlist_id, user_id, action="update")

        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise InvalidInputError(f"Cannot update wishlist fields: {', '.join(sorted(unknown))}")
        cleared = REQUIRED_FIELDS & {field for field, value in changes.items() if value is None}
        if cleared:
            raise InvalidInputError(
                f"Wishlist fields cannot be empty: {', '.join(sorted(cleared))}"
            )

        if changes.get("is_default") and not wishlist.is_default:
            self._unset_default(user_id)
            logger.info("Wishlist %s is now the default for user %s", wishlist_id, user_id)

        for field, value in changes.items():
            if field == "privacy" and value is not None:
                value = Privacy(value).value
            setattr(wishlist, field, value)

        self.db.commit()
        self.db.refresh(wishlist)
        return wishlist

    def delete_wishlist(self, wishlist_id: str, user_id: str) -> None:
        """Delete a wishlist owned by ``user_id`` together with its items."""
        wishlist = self.get_owned_wishlist(wishlist_id, user_id, action="delete")
        self.db.delete(wishlist)
        self.db.commit()
        logger.info("Deleted wishlist %s for user %s", wishlist_id, user_id)

    def list_visible_wishlists(self, owner_id: str, viewer_id: str | None) -> list[Wishlist]:
        """Wishlists of ``owner_id`` to show on their profile page.

        Owners see everything. Other viewers see public lists, plus private
        ones when they are an accepted friend. Personal lists stay hidden.
        """
        wishlists = self.get_user_wishlists(owner_id)
        if viewer_id == owner_id:
            return wishlists

        is_friend = viewer_id is not None and self.friendship_service.are_friends(
            viewer_id, owner_id
        )
        visible = []
        for wishlist in wishlists:
            if wishlist.privacy == Privacy.PUBLIC:
                visible.append(wishlist)
            elif wishlist.privacy == Privacy.PRIVATE and is_friend:
                visible.append(wishlist)
        return visible

    def browse_public_owners(self, viewer_id: str | None) -> list[User]:
        """Users with at least one public wishlist, excluding the viewer."""
        owner_ids = select(Wishlist.user_id).where(Wishlist.privacy == Privacy.PUBLIC.value)
        query = self.db.query(User).filter(User.id.in_(owner_ids))
        if viewer_id is not None:
            query = query.filter(User.id != viewer_id)
        return query.order_by(User.username).all()

    def _share_link_exists(self, share_link: str) -> bool:
        return (
            self.db.query(Wishlist.id).filter(Wishlist.share_link == share_link).first()
            is not None
        )

    def _unset_default(self, user_id: str) -> None:
        # Flushed with the caller's insert/update so both land in one commit
        self.db.query(Wishlist).filter(
            Wishlist.user_id == user_id, Wishlist.is_default.is_(True)
        ).update({Wishlist.is_default: False}, synchronize_session="fetch")
