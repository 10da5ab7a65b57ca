"""Comments and reactions on wishlist items."""

import logging
from collections import defaultdict
from typing import Any

from sqlalchemy.orm import Session

from src.models.comment import Comment, Reaction
from src.models.item import WishlistItem
from src.services.errors import InvalidInputError, NotFoundError, UnauthorizedError
from src.services.privacy import ensure_can_view

logger = logging.getLogger(__name__)


class SocialService:
    """Service for item comments and reactions."""

    def __init__(self, db: Session):
        self.db = db

    def get_viewable_item(self, item_id: str, viewer_id: str | None) -> WishlistItem:
        item = self.db.query(WishlistItem).filter(WishlistItem.id == item_id).first()
        if not item:
            raise NotFoundError("Item not found")
        ensure_can_view(item.wishlist.privacy, item.wishlist.user_id, viewer_id)
        return item

    # Comments

    def list_comments(self, item_id: str, viewer_id: str | None) -> list[Comment]:
        """Comments on an item, newest first."""
        self.get_viewable_item(item_id, viewer_id)
        return (
            self.db.query(Comment)
            .filter(Comment.item_id == item_id)
            .order_by(Comment.created_at.desc())
            .all()
        )

    def add_comment(
        self, item_id: str, user_id: str, content: str, parent_id: str | None = None
    ) -> Comment:
        self.get_viewable_item(item_id, user_id)

        content = content.strip()
        if not content:
            raise InvalidInputError("Comment content is required")

        if parent_id:
            parent = self.db.query(Comment).filter(Comment.id == parent_id).first()
            if not parent or parent.item_id != item_id:
                raise NotFoundError("Parent comment not found")

        comment = Comment(item_id=item_id, user_id=user_id, content=content, parent_id=parent_id)
        self.db.add(comment)
        self.db.commit()
        self.db.refresh(comment)
        return comment

    def update_comment(self, comment_id: str, user_id: str, content: str) -> Comment:
        comment = self._get_own_comment(comment_id, user_id)

        content = content.strip()
        if not content:
            raise InvalidInputError("Comment content is required")

        comment.content = content
        self.db.commit()
        self.db.refresh(comment)
        return comment

    def delete_comment(self, comment_id: str, user_id: str) -> None:
        comment = self._get_own_comment(comment_id, user_id)
        self.db.delete(comment)
        self.db.commit()

    def _get_own_comment(self, comment_id: str, user_id: str) -> Comment:
        comment = self.db.query(Comment).filter(Comment.id == comment_id).first()
        if not comment:
            raise NotFoundError("Comment not found")
        if comment.user_id != user_id:
            raise UnauthorizedError("You can only change your own comments")
        return comment

    # Reactions

    def toggle_reaction(self, item_id: str, user_id: str, reaction_type: str) -> Reaction | None:
        """Add the reaction, or remove it if the user already reacted that way.

        Returns the new reaction, or None when one was removed.
        """
        self.get_viewable_item(item_id, user_id)

        existing = (
            self.db.query(Reaction)
            .filter(
                Reaction.item_id == item_id,
                Reaction.user_id == user_id,
                Reaction.type == reaction_type,
            )
            .first()
        )
        if existing:
            self.db.delete(existing)
            self.db.commit()
            return None

        reaction = Reaction(item_id=item_id, user_id=user_id, type=reaction_type)
        self.db.add(reaction)
        self.db.commit()
        self.db.refresh(reaction)
        return reaction

    def summarize_reactions(self, item_id: str, viewer_id: str | None) -> dict[str, Any]:
        """All reactions on an item with counts per type and types per user."""
        self.get_viewable_item(item_id, viewer_id)
        reactions = (
            self.db.query(Reaction)
            .filter(Reaction.item_id == item_id)
            .order_by(Reaction.created_at)
            .all()
        )

        counts: dict[str, int] = defaultdict(int)
        user_reactions: dict[str, list[str]] = defaultdict(list)
        for reaction in reactions:
            counts[reaction.type] += 1
            user_reactions[reaction.user_id].append(reaction.type)

        return {
            "reactions": reactions,
            "counts": dict(counts),
            "user_reactions": dict(user_reactions),
        }
