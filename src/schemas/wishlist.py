"""Wishlist schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.models.enums import Privacy


class WishlistCreate(BaseModel):
    """Create a new wishlist."""

    name: str = Field(..., max_length=255)
    description: str | None = Field(None, max_length=2000)
    privacy: Privacy = Privacy.PUBLIC
    icon: str | None = Field(None, max_length=50)
    color: str | None = Field(None, max_length=20)
    is_default: bool = False

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Name is required")
        return value


class WishlistUpdate(BaseModel):
    """Update a wishlist."""

    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, max_length=2000)
    privacy: Privacy | None = None
    icon: str | None = Field(None, max_length=50)
    color: str | None = Field(None, max_length=20)
    is_default: bool | None = None


class WishlistResponse(BaseModel):
    """Wishlist response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str | None
    user_id: str
    privacy: Privacy
    share_link: str | None
    icon: str | None
    color: str | None
    is_default: bool
    created_at: datetime
    updated_at: datetime


class ModeratorStatusResponse(BaseModel):
    """Whether the current user moderates a wishlist's owner."""

    is_moderator: bool


class FriendCheckResponse(BaseModel):
    """Whether the current user is an accepted friend of a profile's owner."""

    is_friend: bool
