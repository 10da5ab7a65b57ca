"""Authentication schemas."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserRegister(BaseModel):
    """User registration request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=8, max_length=72)
    name: str | None = Field(None, max_length=255)
    username: str | None = Field(None, min_length=2, max_length=50, pattern=r"^[A-Za-z0-9_.-]+$")


class UserLogin(BaseModel):
    """User login request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=8, max_length=72)


class AuthResponse(BaseModel):
    """Authentication response with token and user info."""

    access_token: str
    token_type: str = "bearer"  # noqa: S105
    user: "UserResponse"


class UserResponse(BaseModel):
    """User information response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    name: str | None
    username: str | None = None
    image: str | None = None
    bio: str | None = None


class PublicUserResponse(BaseModel):
    """User information safe to show to other users."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str | None
    username: str | None = None
    image: str | None = None


class ProfileUpdate(BaseModel):
    """Editable public profile fields."""

    name: str | None = Field(None, max_length=255)
    username: str | None = Field(None, min_length=2, max_length=50, pattern=r"^[A-Za-z0-9_.-]+$")
    image: str | None = Field(None, max_length=2048)
    bio: str | None = Field(None, max_length=1000)
