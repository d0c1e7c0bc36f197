from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class BookingRequestDTO(BaseModel):
    """Booking form as posted by the website. Required fields are checked by the use case."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str | None = None
    email: str | None = None
    phone: str | None = None
    service: str | list[str] | None = None
    date: str | None = None
    time: str | None = None
    location: str | None = None
    address: str | None = None
    notes: str | None = None
    total_price: float = Field(default=0, alias="totalPrice")
    service_pricing: list[dict[str, Any]] = Field(default_factory=list, alias="servicePricing")
    mehendi_hours: int | None = Field(default=0, alias="mehendiHours")
    payment_method: str = Field(default="none", alias="paymentMethod")
    payment_status: str = Field(default="unpaid", alias="paymentStatus")
