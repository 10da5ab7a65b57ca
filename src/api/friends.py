"""Friendship API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from src.api.dependencies import get_current_user, get_friendship_service
from src.database import get_db
from src.models.user import User
from src.schemas.auth import PublicUserResponse
from src.schemas.friendship import FriendRequestCreate, FriendResponse, FriendshipResponse
from src.services.auth import find_user
from src.services.friendship_service import FriendshipService

router = APIRouter(prefix="/api/v1/friends", tags=["friends"])


@router.get("", response_model=list[FriendResponse])
def get_friends(
    current_user: Annotated[User, Depends(get_current_user)],
    friendship_service: Annotated[FriendshipService, Depends(get_friendship_service)],
):
    """Get the current user's accepted relationships."""
    return [
        FriendResponse(
            friendship=FriendshipResponse.model_validate(edge),
            user=PublicUserResponse.model_validate(user),
        )
        for edge, user in friendship_service.get_friends(current_user.id)
    ]


@router.get("/pending", response_model=list[FriendResponse])
def get_pending_requests(
    current_user: Annotated[User, Depends(get_current_user)],
    friendship_service: Annotated[FriendshipService, Depends(get_friendship_service)],
):
    """Get friend requests waiting for the current user's answer."""
    return [
        FriendResponse(
            friendship=FriendshipResponse.model_validate(edge),
            user=PublicUserResponse.model_validate(user),
        )
        for edge, user in friendship_service.get_pending_requests(current_user.id)
    ]


@router.post("", response_model=FriendshipResponse, status_code=status.HTTP_201_CREATED)
def send_friend_request(
    request_data: FriendRequestCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
    friendship_service: Annotated[FriendshipService, Depends(get_friendship_service)],
):
    """Send a friend request to another user."""
    friend = find_user(db, request_data.username)
    if not friend:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    return friendship_service.send_request(
        current_user.id, friend.id, request_data.relationship_type
    )


@router.post("/{friendship_id}/accept", response_model=FriendshipResponse)
def accept_friend_request(
    friendship_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    friendship_service: Annotated[FriendshipService, Depends(get_friendship_service)],
):
    """Accept a friend request addressed to the current user."""
    return friendship_service.accept_request(friendship_id, current_user.id)
