"""SQLAlchemy models."""

from src.models.comment import Comment, Reaction
from src.models.friendship import Friendship
from src.models.item import WishlistItem
from src.models.price_alert import PriceAlert
from src.models.user import User
from src.models.wishlist import Wishlist

__all__ = [
    "User",
    "Wishlist",
    "WishlistItem",
    "PriceAlert",
    "Friendship",
    "Comment",
    "Reaction",
]
