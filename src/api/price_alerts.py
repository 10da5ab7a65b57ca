"""Price alert API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_current_user, get_price_alert_service
from src.models.user import User
from src.schemas.price_alert import PriceAlertCreate, PriceAlertResponse, PriceAlertUpdate
from src.services.price_alert_service import PriceAlertService

router = APIRouter(prefix="/api/v1", tags=["price-alerts"])


@router.get("/items/{item_id}/price-alerts", response_model=list[PriceAlertResponse])
def get_price_alerts(
    item_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    alert_service: Annotated[PriceAlertService, Depends(get_price_alert_service)],
):
    """Get the current user's alerts on an item."""
    return alert_service.get_alerts(item_id, current_user.id)


@router.post(
    "/items/{item_id}/price-alerts",
    response_model=PriceAlertResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_price_alert(
    item_id: str,
    alert_data: PriceAlertCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    alert_service: Annotated[PriceAlertService, Depends(get_price_alert_service)],
):
    """Watch an item for a price drop."""
    return alert_service.create_alert(
        item_id,
        current_user.id,
        target_price=alert_data.target_price,
        percent_drop=alert_data.percent_drop,
    )


@router.put("/price-alerts/{alert_id}", response_model=PriceAlertResponse)
def update_price_alert(
    alert_id: str,
    alert_data: PriceAlertUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    alert_service: Annotated[PriceAlertService, Depends(get_price_alert_service)],
):
    """Update one of the current user's alerts."""
    changes = alert_data.model_dump(exclude_unset=True)
    return alert_service.update_alert(alert_id, current_user.id, changes)


@router.delete("/price-alerts/{alert_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_price_alert(
    alert_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    alert_service: Annotated[PriceAlertService, Depends(get_price_alert_service)],
):
    """Delete one of the current user's alerts."""
    alert_service.delete_alert(alert_id, current_user.id)
