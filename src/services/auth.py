"""Authentication service for JWT, password handling and user profiles."""

import logging
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from src.config import get_settings
from src.models.user import User
from src.services.errors import ConflictError, InvalidInputError

logger = logging.getLogger(__name__)

settings = get_settings()

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def create_access_token(user_id: str, email: str) -> str:
    """Create a JWT access token."""
    expire = datetime.now(UTC) + timedelta(minutes=settings.jwt_expiration_minutes)
    to_encode = {
        "sub": user_id,
        "email": email,
        "exp": expire,
    }
    encoded_jwt = jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)
    return encoded_jwt


def decode_access_token(token: str) -> dict | None:
    """Decode and validate a JWT token."""
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
        return payload
    except JWTError:
        return None


def authenticate_user(db: Session, email: str, password: str) -> User | None:
    """Authenticate a user by email and password."""
    user = db.query(User).filter(User.email == email).first()
    if not user:
        return None
    if not verify_password(password, user.password_hash):
        return None
    return user


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email."""
    return db.query(User).filter(User.email == email).first()


def get_user_by_username(db: Session, username: str) -> User | None:
    """Get a user by username."""
    return db.query(User).filter(User.username == username).first()


def find_user(db: Session, username_or_id: str) -> User | None:
    """Resolve a profile path segment.

    Usernames take precedence; the user id is only tried when no user has
    that username, so a username shaped like another user's id still
    resolves to its owner.
    """
    return get_user_by_username(db, username_or_id) or db.get(User, username_or_id)


def create_user(
    db: Session,
    email: str,
    password: str,
    name: str | None = None,
    username: str | None = None,
) -> User:
    """Create a new user."""
    hashed_password = get_password_hash(password)
    user = User(email=email, password_hash=hashed_password, name=name, username=username)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


PROFILE_FIELDS = {"name", "username", "image", "bio"}


def update_profile(db: Session, user: User, changes: dict) -> User:
    """Update a user's public profile fields."""
    unknown = set(changes) - PROFILE_FIELDS
    if unknown:
        raise InvalidInputError(f"Cannot update profile fields: {', '.join(sorted(unknown))}")

    username = changes.get("username")
    if username and username != user.username:
        taken = db.query(User.id).filter(User.username == username, User.id != user.id).first()
        if taken:
            raise ConflictError("Username already taken")

    for field, value in changes.items():
        setattr(user, field, value)
    db.commit()
    db.refresh(user)
    logger.info("User %s updated profile fields %s", user.id, sorted(changes))
    return user
