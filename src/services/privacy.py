"""Wishlist visibility rules.

The same decision applies whether a wishlist is reached by id or by share
link; the link is only a way to find the list.
"""

from src.models.enums import Privacy
from src.services.errors import AuthenticationRequiredError, UnauthorizedError


def can_view(privacy: str | None, owner_id: str, viewer_id: str | None) -> bool:
    """Decide whether ``viewer_id`` (None for anonymous) may see a wishlist."""
    if viewer_id is not None and viewer_id == owner_id:
        return True

    if privacy == Privacy.PERSONAL:
        return False
    if privacy == Privacy.PRIVATE:
        return viewer_id is not None
    return True


def ensure_can_view(privacy: str | None, owner_id: str, viewer_id: str | None) -> None:
    """Raise if ``viewer_id`` may not see the wishlist."""
    if can_view(privacy, owner_id, viewer_id):
        return

    if privacy == Privacy.PERSONAL:
        raise UnauthorizedError(
            "This wishlist is personal and can only be viewed by its creator"
        )
    raise AuthenticationRequiredError("This wishlist is private. Please sign in to view it")
