"""Enums for model fields."""

from enum import Enum


class Privacy(str, Enum):
    """Who may view a wishlist."""

    PUBLIC = "public"
    PRIVATE = "private"
    PERSONAL = "personal"


class ClaimStatus(str, Enum):
    """Claim lifecycle of a wishlist item."""

    NONE = "none"
    PENDING = "pending"
    CONFIRMED = "confirmed"
    REJECTED = "rejected"
    PURCHASED = "purchased"


class RelationshipType(str, Enum):
    """Kind of relationship recorded on a friendship edge."""

    FRIEND = "friend"
    FAMILY = "family"
    STREAMER = "streamer"
    FAN = "fan"
    MODERATOR = "moderator"


class FriendshipStatus(str, Enum):
    """State of a friendship request."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    BLOCKED = "blocked"
