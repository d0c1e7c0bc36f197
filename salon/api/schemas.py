from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from salon.domain.entities.booking import Booking


class CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class AvailableTimesResponseSchema(CamelModel):
    date: str
    available_hours: list[int] = Field(alias="availableHours")
    unavailable_hours: list[int] = Field(alias="unavailableHours")


class ValidateSlotRequestSchema(CamelModel):
    date: str | None = None
    time: str | None = None
    service: str | list[str] | None = None
    mehendi_hours: int | None = Field(default=0, alias="mehendiHours")


class ValidateSlotResponseSchema(CamelModel):
    available: bool
    conflicting_hour: int | None = Field(default=None, alias="conflictingHour")
    conflicting_service: str | None = Field(default=None, alias="conflictingService")


class BookingCreatedSchema(CamelModel):
    message: str
    booking_id: str = Field(alias="bookingId")
    cancel_token: str = Field(alias="cancelToken")


class UnbookRequestSchema(BaseModel):
    token: str | None = None


class StatusUpdateSchema(BaseModel):
    status: str


class BookingSummarySchema(BaseModel):
    name: str
    email: str
    service: str
    date: str


class CancelledResponseSchema(BaseModel):
    message: str
    booking: BookingSummarySchema


class BookingSchema(BaseModel):
    id: str | None
    name: str
    email: str
    phone: str | None = None
    service: str
    date: str
    time: str
    location: str | None = None
    address: str | None = None
    notes: str | None = None
    total_price: float = 0
    mehendi_hours: int = 0
    payment_method: str
    payment_status: str
    status: str
    user_id: str | None = None
    created_at: str | None = None

    @classmethod
    def from_booking(cls, booking: Booking) -> "BookingSchema":
        return cls(
            id=booking.id,
            name=booking.name,
            email=booking.email,
            phone=booking.phone,
            service=booking.service_label,
            date=booking.date,
            time=booking.time,
            location=booking.location,
            address=booking.address,
            notes=booking.notes,
            total_price=booking.total_price,
            mehendi_hours=booking.mehendi_hours,
            payment_method=booking.payment_method,
            payment_status=booking.payment_status,
            status=booking.status.value,
            user_id=booking.user_id,
            created_at=booking.created_at,
        )


class BookingListSchema(BaseModel):
    message: str
    bookings: list[BookingSchema]
