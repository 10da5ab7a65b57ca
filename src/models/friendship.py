"""Friendship model."""

from sqlalchemy import Column, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.enums import FriendshipStatus, RelationshipType
from src.models.mixins import TimestampMixin, new_id


class Friendship(Base, TimestampMixin):
    """Directed relationship edge from user_id (requester) to friend_id."""

    __tablename__ = "friendships"
    __table_args__ = (UniqueConstraint("user_id", "friend_id", name="uq_friendship_pair"),)

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    friend_id = Column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    relationship_type = Column(String(20), nullable=False, default=RelationshipType.FRIEND.value)
    status = Column(String(20), nullable=False, default=FriendshipStatus.PENDING.value)

    # Relationships
    user = relationship("User", foreign_keys=[user_id])
    friend = relationship("User", foreign_keys=[friend_id])
