"""FastAPI dependencies for authentication, database and services."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from src.database import get_db
from src.models.user import User
from src.services.auth import decode_access_token
from src.services.claim_service import ClaimService
from src.services.friendship_service import FriendshipService
from src.services.item_service import ItemService
from src.services.price_alert_service import PriceAlertService
from src.services.social_service import SocialService
from src.services.wishlist_service import WishlistService

security = HTTPBearer()
optional_security = HTTPBearer(auto_error=False)


def _user_from_token(db: Session, token: str) -> User:
    payload = decode_access_token(token)

    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user_id = payload.get("sub")
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user = db.query(User).filter(User.id == str(user_id)).first()
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return user


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> User:
    """Get the current authenticated user from JWT token."""
    return _user_from_token(db, credentials.credentials)


def get_optional_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(optional_security)],
    db: Annotated[Session, Depends(get_db)],
) -> User | None:
    """Get the current user if a token was sent, None for anonymous visitors."""
    if credentials is None:
        return None
    return _user_from_token(db, credentials.credentials)


def get_wishlist_service(
    db: Annotated[Session, Depends(get_db)],
) -> WishlistService:
    """Get wishlist service with dependencies."""
    return WishlistService(db)


def get_item_service(
    db: Annotated[Session, Depends(get_db)],
) -> ItemService:
    """Get item service with dependencies."""
    return ItemService(db, PriceAlertService(db))


def get_claim_service(
    db: Annotated[Session, Depends(get_db)],
) -> ClaimService:
    """Get claim service with dependencies."""
    return ClaimService(db, FriendshipService(db))


def get_price_alert_service(
    db: Annotated[Session, Depends(get_db)],
) -> PriceAlertService:
    return PriceAlertService(db)


def get_friendship_service(
    db: Annotated[Session, Depends(get_db)],
) -> FriendshipService:
    return FriendshipService(db)


def get_social_service(
    db: Annotated[Session, Depends(get_db)],
) -> SocialService:
    return SocialService(db)
