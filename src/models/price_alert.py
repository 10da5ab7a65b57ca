"""Price alert model."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import TimestampMixin, new_id


class PriceAlert(Base, TimestampMixin):
    """A user's request to be told when an item's price drops."""

    __tablename__ = "price_alerts"

    id = Column(String(36), primary_key=True, default=new_id)
    item_id = Column(
        String(36), ForeignKey("wishlist_items.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id = Column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    target_price = Column(String(50), nullable=True)  # fire at or below this amount
    percent_drop = Column(Integer, nullable=True)  # fire when price drops by this percentage
    is_active = Column(Boolean, nullable=False, default=True)
    last_notified_at = Column(DateTime(timezone=True), nullable=True)

    # Relationships
    item = relationship("WishlistItem", back_populates="price_alerts")
    user = relationship("User")
