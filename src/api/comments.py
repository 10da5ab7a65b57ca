"""Comment and reaction API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_current_user, get_optional_user, get_social_service
from src.models.user import User
from src.schemas.comment import (
    CommentCreate,
    CommentResponse,
    CommentUpdate,
    ReactionResponse,
    ReactionSummary,
    ReactionToggle,
    ReactionToggleResponse,
)
from src.services.social_service import SocialService

router = APIRouter(prefix="/api/v1", tags=["comments"])


@router.get("/items/{item_id}/comments", response_model=list[CommentResponse])
def get_comments(
    item_id: str,
    current_user: Annotated[User | None, Depends(get_optional_user)],
    social_service: Annotated[SocialService, Depends(get_social_service)],
):
    """Get comments on an item, newest first."""
    viewer_id = current_user.id if current_user else None
    return social_service.list_comments(item_id, viewer_id)


@router.post(
    "/items/{item_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_comment(
    item_id: str,
    comment_data: CommentCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    social_service: Annotated[SocialService, Depends(get_social_service)],
):
    """Comment on an item."""
    return social_service.add_comment(
        item_id, current_user.id, comment_data.content, comment_data.parent_id
    )


@router.put("/comments/{comment_id}", response_model=CommentResponse)
def update_comment(
    comment_id: str,
    comment_data: CommentUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    social_service: Annotated[SocialService, Depends(get_social_service)],
):
    """Edit one of the current user's comments."""
    return social_service.update_comment(comment_id, current_user.id, comment_data.content)


@router.delete("/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_comment(
    comment_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    social_service: Annotated[SocialService, Depends(get_social_service)],
):
    """Delete one of the current user's comments."""
    social_service.delete_comment(comment_id, current_user.id)


@router.get("/items/{item_id}/reactions", response_model=ReactionSummary)
def get_reactions(
    item_id: str,
    current_user: Annotated[User | None, Depends(get_optional_user)],
    social_service: Annotated[SocialService, Depends(get_social_service)],
):
    """Get reactions on an item with counts."""
    viewer_id = current_user.id if current_user else None
    return social_service.summarize_reactions(item_id, viewer_id)


@router.post("/items/{item_id}/reactions", response_model=ReactionToggleResponse)
def toggle_reaction(
    item_id: str,
    reaction_data: ReactionToggle,
    current_user: Annotated[User, Depends(get_current_user)],
    social_service: Annotated[SocialService, Depends(get_social_service)],
):
    """Add a reaction, or remove it if already present."""
    reaction = social_service.toggle_reaction(item_id, current_user.id, reaction_data.type)
    return ReactionToggleResponse(
        action="added" if reaction else "removed",
        reaction=ReactionResponse.model_validate(reaction) if reaction else None,
    )
