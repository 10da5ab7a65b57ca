"""Wishlist API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from src.api.dependencies import (
    get_current_user,
    get_friendship_service,
    get_optional_user,
    get_wishlist_service,
)
from src.database import get_db
from src.models.user import User
from src.schemas.auth import PublicUserResponse
from src.schemas.wishlist import (
    FriendCheckResponse,
    ModeratorStatusResponse,
    WishlistCreate,
    WishlistResponse,
    WishlistUpdate,
)
from src.services.auth import find_user
from src.services.friendship_service import FriendshipService
from src.services.wishlist_service import WishlistService

router = APIRouter(prefix="/api/v1", tags=["wishlists"])


@router.get("/wishlists", response_model=list[WishlistResponse])
def get_wishlists(
    current_user: Annotated[User, Depends(get_current_user)],
    wishlist_service: Annotated[WishlistService, Depends(get_wishlist_service)],
):
    """Get the current user's wishlists, creating a default one on first use."""
    wishlists = wishlist_service.get_user_wishlists(current_user.id)
    if not wishlists:
        wishlists = [wishlist_service.get_default_wishlist(current_user.id)]
    return wishlists


@router.post("/wishlists", response_model=WishlistResponse, status_code=status.HTTP_201_CREATED)
def create_wishlist(
    wishlist_data: WishlistCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    wishlist_service: Annotated[WishlistService, Depends(get_wishlist_service)],
):
    """Create a new wishlist."""
    return wishlist_service.create_wishlist(
        current_user.id,
        name=wishlist_data.name,
        description=wishlist_data.description,
        privacy=wishlist_data.privacy,
        icon=wishlist_data.icon,
        color=wishlist_data.color,
        is_default=wishlist_data.is_default,
    )


@router.get("/wishlists/share/{share_link}", response_model=WishlistResponse)
def get_wishlist_by_share_link(
    share_link: str,
    current_user: Annotated[User | None, Depends(get_optional_user)],
    wishlist_service: Annotated[WishlistService, Depends(get_wishlist_service)],
):
    """Look up a wishlist by its share link."""
    viewer_id = current_user.id if current_user else None
    return wishlist_service.get_wishlist_by_share_link(share_link, viewer_id)


@router.get("/wishlists/{wishlist_id}", response_model=WishlistResponse)
def get_wishlist(
    wishlist_id: str,
    current_user: Annotated[User | None, Depends(get_optional_user)],
    wishlist_service: Annotated[WishlistService, Depends(get_wishlist_service)],
):
    """Get a specific wishlist."""
    viewer_id = current_user.id if current_user else None
    return wishlist_service.get_wishlist_for_viewer(wishlist_id, viewer_id)


@router.put("/wishlists/{wishlist_id}", response_model=WishlistResponse)
def update_wishlist(
    wishlist_id: str,
    wishlist_data: WishlistUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    wishlist_service: Annotated[WishlistService, Depends(get_wishlist_service)],
):
    """Update a wishlist (owner only)."""
    changes = wishlist_data.model_dump(exclude_unset=True)
    return wishlist_service.update_wishlist(wishlist_id, current_user.id, changes)


@router.delete("/wishlists/{wishlist_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_wishlist(
    wishlist_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    wishlist_service: Annotated[WishlistService, Depends(get_wishlist_service)],
):
    """Delete a wishlist and its items (owner only)."""
    wishlist_service.delete_wishlist(wishlist_id, current_user.id)


@router.get("/wishlists/{wishlist_id}/moderator-status", response_model=ModeratorStatusResponse)
def get_moderator_status(
    wishlist_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    wishlist_service: Annotated[WishlistService, Depends(get_wishlist_service)],
    friendship_service: Annotated[FriendshipService, Depends(get_friendship_service)],
):
    """Check whether the current user moderates this wishlist's owner."""
    wishlist = wishlist_service.get_wishlist(wishlist_id)
    return ModeratorStatusResponse(
        is_moderator=friendship_service.is_moderator(current_user.id, wishlist.user_id)
    )


@router.get("/users/{username}/wishlists", response_model=list[WishlistResponse])
def get_user_profile_wishlists(
    username: str,
    current_user: Annotated[User | None, Depends(get_optional_user)],
    db: Annotated[Session, Depends(get_db)],
    wishlist_service: Annotated[WishlistService, Depends(get_wishlist_service)],
):
    """Get the wishlists a user's profile shows to the current viewer."""
    user = find_user(db, username)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    viewer_id = current_user.id if current_user else None
    return wishlist_service.list_visible_wishlists(user.id, viewer_id)


@router.get("/users/browse", response_model=list[PublicUserResponse])
def browse_users(
    current_user: Annotated[User | None, Depends(get_optional_user)],
    wishlist_service: Annotated[WishlistService, Depends(get_wishlist_service)],
):
    """List other users who have at least one public wishlist."""
    viewer_id = current_user.id if current_user else None
    return wishlist_service.browse_public_owners(viewer_id)


@router.get("/users/{username}/check-friend", response_model=FriendCheckResponse)
def check_friend(
    username: str,
    current_user: Annotated[User | None, Depends(get_optional_user)],
    db: Annotated[Session, Depends(get_db)],
    friendship_service: Annotated[FriendshipService, Depends(get_friendship_service)],
):
    """Check whether the current user is friends with a profile's owner.

    Anonymous viewers and unknown users are simply not friends.
    """
    user = find_user(db, username)
    if current_user is None or user is None:
        return FriendCheckResponse(is_friend=False)
    return FriendCheckResponse(is_friend=friendship_service.are_friends(current_user.id, user.id))
