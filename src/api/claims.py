"""Claim and purchase API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from src.api.dependencies import get_claim_service, get_current_user, get_item_service
from src.models.user import User
from src.schemas.claim import ClaimDecision, MarkPurchased, ProofDecision
from src.schemas.item import ItemResponse
from src.services.claim_service import ClaimService, PurchaseDetails
from src.services.item_service import ItemService

router = APIRouter(prefix="/api/v1/items", tags=["claims"])


@router.post("/{item_id}/claim", response_model=ItemResponse)
def claim_item(
    item_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    item_service: Annotated[ItemService, Depends(get_item_service)],
    claim_service: Annotated[ClaimService, Depends(get_claim_service)],
):
    """Claim an item on a wishlist the current user can see."""
    item_service.get_item_for_viewer(item_id, current_user.id)
    return claim_service.claim(item_id, current_user.id)


@router.post("/{item_id}/unclaim", response_model=ItemResponse)
def unclaim_item(
    item_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    item_service: Annotated[ItemService, Depends(get_item_service)],
    claim_service: Annotated[ClaimService, Depends(get_claim_service)],
):
    """Release a claim (claimer or owner)."""
    item = item_service.get_item(item_id)
    if current_user.id not in (item.claimed_by, item.wishlist.user_id):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Unauthorized: Only the claimer or the owner can release this claim",
        )
    return claim_service.unclaim(item_id, current_user.id)


@router.post("/{item_id}/confirm", response_model=ItemResponse)
def confirm_claim(
    item_id: str,
    decision: ClaimDecision,
    current_user: Annotated[User, Depends(get_current_user)],
    claim_service: Annotated[ClaimService, Depends(get_claim_service)],
):
    """Owner confirms or rejects a pending claim."""
    return claim_service.confirm_claim(item_id, current_user.id, decision.confirm)


@router.post("/{item_id}/mark-purchased", response_model=ItemResponse)
def mark_purchased(
    item_id: str,
    purchase: MarkPurchased,
    current_user: Annotated[User, Depends(get_current_user)],
    claim_service: Annotated[ClaimService, Depends(get_claim_service)],
):
    """Claimer reports a purchase with optional proof."""
    details = PurchaseDetails(**purchase.model_dump())
    return claim_service.mark_as_purchased(item_id, current_user.id, details)


@router.post("/{item_id}/verify-proof", response_model=ItemResponse)
def verify_proof(
    item_id: str,
    decision: ProofDecision,
    current_user: Annotated[User, Depends(get_current_user)],
    claim_service: Annotated[ClaimService, Depends(get_claim_service)],
):
    """Owner or moderator accepts or rejects a purchase proof."""
    return claim_service.verify_proof(item_id, current_user.id, decision.verified)


@router.post("/{item_id}/purchase", response_model=ItemResponse)
def purchase_item(
    item_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    item_service: Annotated[ItemService, Depends(get_item_service)],
    claim_service: Annotated[ClaimService, Depends(get_claim_service)],
):
    """Mark an item purchased without going through a claim."""
    item_service.get_item_for_viewer(item_id, current_user.id)
    return claim_service.purchase_item(item_id, current_user.id)


@router.post("/{item_id}/unpurchase", response_model=ItemResponse)
def unpurchase_item(
    item_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    claim_service: Annotated[ClaimService, Depends(get_claim_service)],
):
    """Owner clears an item's purchase."""
    return claim_service.unpurchase_item(item_id, current_user.id)
