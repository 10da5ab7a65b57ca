"""Friendship and moderator relationships."""

import logging

from sqlalchemy import and_, or_
from sqlalchemy.orm import Session

from src.models.enums import FriendshipStatus, RelationshipType
from src.models.friendship import Friendship
from src.models.user import User
from src.services.errors import InvalidStateError, NotFoundError, UnauthorizedError

logger = logging.getLogger(__name__)


class FriendshipService:
    """Service for friend requests and relationship checks."""

    def __init__(self, db: Session):
        self.db = db

    def find_edge(
        self,
        user_a: str,
        user_b: str,
        relationship_type: RelationshipType | None = None,
        status: FriendshipStatus | None = None,
    ) -> Friendship | None:
        """Find a friendship between two users in either direction."""
        query = self.db.query(Friendship).filter(
            or_(
                and_(Friendship.user_id == user_a, Friendship.friend_id == user_b),
                and_(Friendship.user_id == user_b, Friendship.friend_id == user_a),
            )
        )
        if relationship_type is not None:
            query = query.filter(Friendship.relationship_type == relationship_type.value)
        if status is not None:
            query = query.filter(Friendship.status == status.value)
        return query.first()

    def are_friends(self, user_a: str, user_b: str) -> bool:
        """Check for an accepted relationship of any type between two users."""
        return self.find_edge(user_a, user_b, status=FriendshipStatus.ACCEPTED) is not None

    def is_moderator(self, moderator_id: str, owner_id: str) -> bool:
        """Check whether ``moderator_id`` moderates for ``owner_id``.

        Either direction of an accepted ``moderator`` edge counts.
        """
        edge = self.find_edge(
            moderator_id,
            owner_id,
            relationship_type=RelationshipType.MODERATOR,
            status=FriendshipStatus.ACCEPTED,
        )
        return edge is not None

    def send_request(
        self,
        user_id: str,
        friend_id: str,
        relationship_type: RelationshipType = RelationshipType.FRIEND,
    ) -> Friendship:
        """Send a friend request, returning the existing edge if there already is one."""
        if user_id == friend_id:
            raise InvalidStateError("You cannot send a friend request to yourself")

        if self.db.query(User.id).filter(User.id == friend_id).first() is None:
            raise NotFoundError("User not found")

        existing = self.find_edge(user_id, friend_id)
        if existing:
            return existing

        friendship = Friendship(
            user_id=user_id,
            friend_id=friend_id,
            relationship_type=relationship_type.value,
            status=FriendshipStatus.PENDING.value,
        )
        self.db.add(friendship)
        self.db.commit()
        self.db.refresh(friendship)

        logger.info(
            "Friend request %s sent from %s to %s (%s)",
            friendship.id,
            user_id,
            friend_id,
            relationship_type.value,
        )
        return friendship

    def accept_request(self, friendship_id: str, user_id: str) -> Friendship:
        """Accept a pending request addressed to ``user_id``."""
        friendship = self.db.query(Friendship).filter(Friendship.id == friendship_id).first()
        if not friendship:
            raise NotFoundError("Friend request not found")

        if friendship.friend_id != user_id:
            raise UnauthorizedError("Only the recipient can accept this friend request")

        if friendship.status == FriendshipStatus.BLOCKED:
            raise InvalidStateError("This friendship is blocked")

        friendship.status = FriendshipStatus.ACCEPTED.value
        self.db.commit()
        self.db.refresh(friendship)
        return friendship

    def get_friends(self, user_id: str) -> list[tuple[Friendship, User]]:
        """Accepted relationships of ``user_id`` paired with the other user."""
        edges = (
            self.db.query(Friendship)
            .filter(
                or_(Friendship.user_id == user_id, Friendship.friend_id == user_id),
                Friendship.status == FriendshipStatus.ACCEPTED.value,
            )
            .order_by(Friendship.created_at)
            .all()
        )
        return [(edge, edge.friend if edge.user_id == user_id else edge.user) for edge in edges]

    def get_pending_requests(self, user_id: str) -> list[tuple[Friendship, User]]:
        """Requests awaiting ``user_id``'s answer, paired with the requester."""
        edges = (
            self.db.query(Friendship)
            .filter(
                Friendship.friend_id == user_id,
                Friendship.status == FriendshipStatus.PENDING.value,
            )
            .order_by(Friendship.created_at)
            .all()
        )
        return [(edge, edge.user) for edge in edges]
