"""Comment and reaction models."""

from sqlalchemy import Column, DateTime, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import TimestampMixin, new_id, utcnow


class Comment(Base, TimestampMixin):
    """Comment on a wishlist item, optionally replying to another comment."""

    __tablename__ = "comments"

    id = Column(String(36), primary_key=True, default=new_id)
    item_id = Column(
        String(36), ForeignKey("wishlist_items.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id = Column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    content = Column(String, nullable=False)
    parent_id = Column(String(36), ForeignKey("comments.id", ondelete="CASCADE"), nullable=True)

    # Relationships
    item = relationship("WishlistItem", back_populates="comments")
    user = relationship("User")


class Reaction(Base):
    """A user's reaction ('like', 'love', 'want', ...) to an item."""

    __tablename__ = "reactions"
    __table_args__ = (
        UniqueConstraint("user_id", "item_id", "type", name="uq_reaction_user_item_type"),
    )

    id = Column(String(36), primary_key=True, default=new_id)
    item_id = Column(
        String(36), ForeignKey("wishlist_items.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id = Column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    type = Column(String(30), nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    # Relationships
    item = relationship("WishlistItem", back_populates="reactions")
    user = relationship("User")
