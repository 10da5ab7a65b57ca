"""Claim workflow schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class ClaimDecision(BaseModel):
    """Owner's answer to a pending claim."""

    confirm: bool


class ProofDecision(BaseModel):
    """Owner or moderator's verdict on a purchase proof."""

    verified: bool


class MarkPurchased(BaseModel):
    """Claimer's purchase report."""

    purchase_proof: str | None = Field(None, max_length=2048)
    purchase_date: datetime | None = None
    tracking_number: str | None = Field(None, max_length=255)
    purchase_notes: str | None = Field(None, max_length=2000)
    purchase_amount: str | None = Field(None, max_length=50)
    is_anonymous: bool = False
