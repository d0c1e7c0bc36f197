from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class BookingStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class Booking:
    date: str  # YYYY-MM-DD, used as an opaque key
    services: tuple[str, ...]  # raw service ids, in the order they were booked
    time: str  # HH:MM as submitted
    start_hour: int | None  # hour part of time; None when a stored time cannot be read
    mehendi_hours: int = 0
    id: str | None = None
    name: str = ""
    email: str = ""
    phone: str | None = None
    location: str | None = None
    address: str | None = None
    notes: str | None = None
    total_price: float = 0
    service_pricing: list[dict] = field(default_factory=list)
    payment_method: str = "none"
    payment_status: str = "unpaid"
    status: BookingStatus = BookingStatus.PENDING
    cancel_token: str | None = None
    user_id: str | None = None
    created_at: str | None = None

    @property
    def service_label(self) -> str:
        return ", ".join(self.services)

    def summary(self) -> dict[str, str]:
        return {
            "name": self.name,
            "email": self.email,
            "service": self.service_label,
            "date": self.date,
        }
