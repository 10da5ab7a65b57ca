"""Price alert schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator


class PriceAlertCreate(BaseModel):
    """Register a price alert on an item."""

    target_price: str | None = Field(None, max_length=50)
    percent_drop: int | None = Field(None, gt=0, le=100)

    @model_validator(mode="after")
    def require_threshold(self) -> "PriceAlertCreate":
        if not self.target_price and self.percent_drop is None:
            raise ValueError("Either target_price or percent_drop is required")
        return self


class PriceAlertUpdate(BaseModel):
    """Update a price alert."""

    target_price: str | None = Field(None, max_length=50)
    percent_drop: int | None = Field(None, gt=0, le=100)
    is_active: bool | None = None


class PriceAlertResponse(BaseModel):
    """Price alert response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    item_id: str
    user_id: str
    target_price: str | None
    percent_drop: int | None
    is_active: bool
    last_notified_at: datetime | None
    created_at: datetime
    updated_at: datetime
