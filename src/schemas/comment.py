"""Comment and reaction schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CommentCreate(BaseModel):
    """Create a comment on an item."""

    content: str = Field(..., min_length=1, max_length=2000)
    parent_id: str | None = None


class CommentUpdate(BaseModel):
    """Edit a comment."""

    content: str = Field(..., min_length=1, max_length=2000)


class CommentResponse(BaseModel):
    """Comment response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    item_id: str
    user_id: str
    content: str
    parent_id: str | None
    created_at: datetime
    updated_at: datetime


class ReactionToggle(BaseModel):
    """Toggle a reaction on an item."""

    type: str = Field(..., min_length=1, max_length=30)


class ReactionResponse(BaseModel):
    """Reaction response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    item_id: str
    user_id: str
    type: str
    created_at: datetime


class ReactionToggleResponse(BaseModel):
    """Result of toggling a reaction."""

    action: str  # 'added' or 'removed'
    reaction: ReactionResponse | None


class ReactionSummary(BaseModel):
    """All reactions on an item with aggregates."""

    reactions: list[ReactionResponse]
    counts: dict[str, int]
    user_reactions: dict[str, list[str]]
