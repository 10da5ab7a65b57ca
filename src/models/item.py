"""Wishlist item model."""

from sqlalchemy import JSON, Boolean, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.enums import ClaimStatus
from src.models.mixins import TimestampMixin, new_id


class WishlistItem(Base, TimestampMixin):
    """Item on a wishlist, including its claim/purchase sub-record."""

    __tablename__ = "wishlist_items"

    id = Column(String(36), primary_key=True, default=new_id)
    wishlist_id = Column(
        String(36), ForeignKey("wishlists.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id = Column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title = Column(String(500), nullable=False)
    url = Column(String, nullable=False)
    affiliate_url = Column(String, nullable=True)
    image = Column(String, nullable=True)
    price = Column(String(50), nullable=True)  # free text, e.g. "$49.99"
    description = Column(String, nullable=True)
    priority = Column(Integer, nullable=False, default=0)  # -1 low, 0 normal, 1 high
    notes = Column(String, nullable=True)
    item_type = Column(String(50), nullable=True)  # clothing, shoes, hat, accessories, other
    category = Column(String(100), nullable=True)
    tags = Column(JSON, nullable=True)
    size = Column(String(50), nullable=True)
    quantity = Column(Integer, nullable=True)
    display_order = Column(Integer, nullable=False, default=0)
    # [{"price": "$50", "date": 1700000000000}, ...], oldest first
    price_history = Column(JSON, nullable=True)

    # Claim / purchase
    claimed_by = Column(String(36), ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    purchased_by = Column(String(36), ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    claim_status = Column(String(20), nullable=False, default=ClaimStatus.NONE.value, index=True)
    is_claimed = Column(Boolean, nullable=False, default=False)
    is_purchased = Column(Boolean, nullable=False, default=False)
    purchase_proof = Column(String, nullable=True)  # URL of receipt image
    purchase_date = Column(DateTime(timezone=True), nullable=True)
    tracking_number = Column(String(255), nullable=True)
    purchase_notes = Column(String, nullable=True)
    purchase_amount = Column(String(50), nullable=True)
    is_anonymous = Column(Boolean, nullable=False, default=False)

    # Proof verification
    proof_verified = Column(Boolean, nullable=False, default=False)
    proof_rejected = Column(Boolean, nullable=False, default=False)
    proof_verified_at = Column(DateTime(timezone=True), nullable=True)
    proof_verified_by = Column(
        String(36), ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    )

    version = Column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}

    # Relationships
    wishlist = relationship("Wishlist", back_populates="items")
    owner = relationship("User", foreign_keys=[user_id])
    claimer = relationship("User", foreign_keys=[claimed_by])
    purchaser = relationship("User", foreign_keys=[purchased_by])
    price_alerts = relationship(
        "PriceAlert", back_populates="item", cascade="all, delete-orphan", passive_deletes=True
    )
    comments = relationship(
        "Comment", back_populates="item", cascade="all, delete-orphan", passive_deletes=True
    )
    reactions = relationship(
        "Reaction", back_populates="item", cascade="all, delete-orphan", passive_deletes=True
    )
