"""Item API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import (
    get_current_user,
    get_item_service,
    get_optional_user,
    get_wishlist_service,
)
from src.models.user import User
from src.schemas.item import ItemCreate, ItemReorder, ItemResponse, ItemUpdate
from src.services.item_service import ItemService
from src.services.wishlist_service import WishlistService

router = APIRouter(prefix="/api/v1", tags=["items"])


@router.get("/wishlists/{wishlist_id}/items", response_model=list[ItemResponse])
def get_items(
    wishlist_id: str,
    current_user: Annotated[User | None, Depends(get_optional_user)],
    wishlist_service: Annotated[WishlistService, Depends(get_wishlist_service)],
    item_service: Annotated[ItemService, Depends(get_item_service)],
):
    """Get all items for a wishlist the viewer may see."""
    viewer_id = current_user.id if current_user else None
    wishlist_service.get_wishlist_for_viewer(wishlist_id, viewer_id)
    return item_service.list_items(wishlist_id)


@router.post(
    "/wishlists/{wishlist_id}/items",
    response_model=ItemResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_item(
    wishlist_id: str,
    item_data: ItemCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    item_service: Annotated[ItemService, Depends(get_item_service)],
):
    """Add an item to one of the current user's wishlists."""
    return item_service.add_item(wishlist_id, current_user.id, item_data.model_dump())


@router.post("/wishlists/{wishlist_id}/items/reorder", response_model=list[ItemResponse])
def reorder_items(
    wishlist_id: str,
    reorder: ItemReorder,
    current_user: Annotated[User, Depends(get_current_user)],
    item_service: Annotated[ItemService, Depends(get_item_service)],
):
    """Set the display order of a wishlist's items."""
    return item_service.reorder_items(wishlist_id, current_user.id, reorder.item_ids)


@router.get("/items/{item_id}", response_model=ItemResponse)
def get_item(
    item_id: str,
    current_user: Annotated[User | None, Depends(get_optional_user)],
    item_service: Annotated[ItemService, Depends(get_item_service)],
):
    """Get a single item."""
    viewer_id = current_user.id if current_user else None
    return item_service.get_item_for_viewer(item_id, viewer_id)


@router.put("/items/{item_id}", response_model=ItemResponse)
def update_item(
    item_id: str,
    item_data: ItemUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    item_service: Annotated[ItemService, Depends(get_item_service)],
):
    """Update an item (owner only)."""
    changes = item_data.model_dump(exclude_unset=True)
    return item_service.update_item(item_id, current_user.id, changes)


@router.delete("/items/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_item(
    item_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    item_service: Annotated[ItemService, Depends(get_item_service)],
):
    """Delete an item (owner only)."""
    item_service.delete_item(item_id, current_user.id)
