"""Domain errors raised by services.

Services raise these at the point of detection; ``src.main`` maps them to
HTTP responses so routes stay thin.
"""

from fastapi import status


class WishlistError(Exception):
    """Base class for domain failures."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(WishlistError):
    """An entity id did not resolve."""

    status_code = status.HTTP_404_NOT_FOUND


class UnauthorizedError(WishlistError):
    """The actor failed an ownership or moderator check."""

    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, message: str):
        if not message.startswith("Unauthorized"):
            message = f"Unauthorized: {message}"
        super().__init__(message)


class AuthenticationRequiredError(UnauthorizedError):
    """An anonymous viewer asked for something that needs a signed-in user."""

    status_code = status.HTTP_401_UNAUTHORIZED


class InvalidInputError(WishlistError):
    """Request data is well-formed but not acceptable."""

    status_code = status.HTTP_400_BAD_REQUEST


class InvalidStateError(WishlistError):
    """The operation is not permitted from the entity's current state."""

    status_code = status.HTTP_409_CONFLICT


class ConflictError(WishlistError):
    """The entity was modified concurrently; the caller may retry."""

    status_code = status.HTTP_409_CONFLICT
