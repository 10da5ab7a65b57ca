"""Wishlist item schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from src.models.enums import ClaimStatus


class ItemCreate(BaseModel):
    """Add an item to a wishlist."""

    url: str = Field(..., min_length=1, max_length=2048)
    title: str | None = Field(None, max_length=500)
    affiliate_url: str | None = Field(None, max_length=2048)
    image: str | None = None
    price: str | None = Field(None, max_length=50)
    description: str | None = Field(None, max_length=5000)
    priority: int = Field(0, ge=-1, le=1)
    notes: str | None = Field(None, max_length=2000)
    item_type: str | None = Field(None, max_length=50)
    category: str | None = Field(None, max_length=100)
    tags: list[str] | None = None
    size: str | None = Field(None, max_length=50)
    quantity: int | None = Field(None, ge=1)


class ItemUpdate(BaseModel):
    """Update an item."""

    title: str | None = Field(None, min_length=1, max_length=500)
    affiliate_url: str | None = Field(None, max_length=2048)
    image: str | None = None
    price: str | None = Field(None, max_length=50)
    description: str | None = Field(None, max_length=5000)
    priority: int | None = Field(None, ge=-1, le=1)
    notes: str | None = Field(None, max_length=2000)
    item_type: str | None = Field(None, max_length=50)
    category: str | None = Field(None, max_length=100)
    tags: list[str] | None = None
    size: str | None = Field(None, max_length=50)
    quantity: int | None = Field(None, ge=1)


class ItemReorder(BaseModel):
    """New display order for a wishlist's items."""

    item_ids: list[str]


class PriceHistoryEntry(BaseModel):
    """A recorded price; ``date`` is epoch milliseconds."""

    price: str
    date: int


class ItemResponse(BaseModel):
    """Item response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    wishlist_id: str
    user_id: str
    title: str
    url: str
    affiliate_url: str | None
    image: str | None
    price: str | None
    description: str | None
    priority: int
    notes: str | None
    item_type: str | None
    category: str | None
    tags: list[str] | None
    size: str | None
    quantity: int | None
    display_order: int
    price_history: list[PriceHistoryEntry] | None

    claimed_by: str | None
    purchased_by: str | None
    claim_status: ClaimStatus
    is_claimed: bool
    is_purchased: bool
    purchase_proof: str | None
    purchase_date: datetime | None
    tracking_number: str | None
    purchase_notes: str | None
    purchase_amount: str | None
    is_anonymous: bool
    proof_verified: bool
    proof_rejected: bool
    proof_verified_at: datetime | None
    proof_verified_by: str | None

    created_at: datetime
    updated_at: datetime
