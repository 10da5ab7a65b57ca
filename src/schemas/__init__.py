"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import AuthResponse, ProfileUpdate, UserLogin, UserRegister, UserResponse
from src.schemas.claim import ClaimDecision, MarkPurchased, ProofDecision
from src.schemas.comment import CommentCreate, CommentResponse, ReactionToggle
from src.schemas.friendship import FriendRequestCreate, FriendResponse
from src.schemas.item import ItemCreate, ItemResponse, ItemUpdate
from src.schemas.price_alert import PriceAlertCreate, PriceAlertResponse, PriceAlertUpdate
from src.schemas.wishlist import WishlistCreate, WishlistResponse, WishlistUpdate

__all__ = [
    "UserRegister",
    "UserLogin",
    "AuthResponse",
    "UserResponse",
    "ProfileUpdate",
    "WishlistCreate",
    "WishlistUpdate",
    "WishlistResponse",
    "ItemCreate",
    "ItemUpdate",
    "ItemResponse",
    "ClaimDecision",
    "ProofDecision",
    "MarkPurchased",
    "PriceAlertCreate",
    "PriceAlertUpdate",
    "PriceAlertResponse",
    "FriendRequestCreate",
    "FriendResponse",
    "CommentCreate",
    "CommentResponse",
    "ReactionToggle",
]
