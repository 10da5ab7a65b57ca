"""User model."""

from sqlalchemy import Column, String

from src.database import Base
from src.models.mixins import TimestampMixin, new_id


class User(Base, TimestampMixin):
    """User model for authentication and ownership."""

    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=new_id)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    name = Column(String(255), nullable=True)
    username = Column(String(50), unique=True, nullable=True, index=True)  # public profile URLs
    image = Column(String, nullable=True)
    bio = Column(String, nullable=True)
