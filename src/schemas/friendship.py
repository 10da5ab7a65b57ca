"""Friendship schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from src.models.enums import FriendshipStatus, RelationshipType
from src.schemas.auth import PublicUserResponse


class FriendRequestCreate(BaseModel):
    """Send a friend request by username or user id."""

    username: str = Field(..., max_length=50)
    relationship_type: RelationshipType = RelationshipType.FRIEND


class FriendshipResponse(BaseModel):
    """Friendship edge response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    friend_id: str
    relationship_type: RelationshipType
    status: FriendshipStatus
    created_at: datetime


class FriendResponse(BaseModel):
    """A relationship together with the other user."""

    friendship: FriendshipResponse
    user: PublicUserResponse
