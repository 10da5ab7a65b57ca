"""Wishlist model."""

from sqlalchemy import Boolean, Column, ForeignKey, String
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.enums import Privacy
from src.models.mixins import TimestampMixin, new_id


class Wishlist(Base, TimestampMixin):
    """A named, shareable collection of wanted items."""

    __tablename__ = "wishlists"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(255), nullable=False)
    description = Column(String, nullable=True)
    user_id = Column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    privacy = Column(String(20), nullable=False, default=Privacy.PUBLIC.value)
    share_link = Column(String(100), unique=True, nullable=True, index=True)  # e.g. "RedGoatJump"
    icon = Column(String(50), nullable=True)  # icon name, e.g. "FaGift"
    color = Column(String(20), nullable=True)  # hex colour, e.g. "#3B82F6"
    is_default = Column(Boolean, nullable=False, default=False)

    # Relationships
    owner = relationship("User", backref="wishlists")
    items = relationship(
        "WishlistItem",
        back_populates="wishlist",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
