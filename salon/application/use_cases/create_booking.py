from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, replace

from salon.application.dto.booking_request import BookingRequestDTO
from salon.application.exceptions import SlotConflictError, ValidationError
from salon.application.ports.booking_store import BookingStorePort
from salon.application.use_cases.availability import AvailabilityEngine
from salon.application.utils.slot_rules import parse_services, parse_start_hour
from salon.domain.entities.booking import Booking


@dataclass(frozen=True)
class BookingCreated:
    booking: Booking
    booking_id: str
    cancel_token: str


class CreateBookingUseCase:
    """
    Validates the requested slot and stores the booking.

    The availability check and the insert are two separate store calls with
    no transaction or lock between them, so two concurrent requests for the
    same slot can both pass the check and both be stored. Closing that gap
    needs a unique constraint on (date, blocked hour) in the bookings table
    or a serialisable check-and-insert on the database side.
    """

    def __init__(self, engine: AvailabilityEngine, store: BookingStorePort) -> None:
        self._engine = engine
        self._store = store
        self._logger = logging.getLogger(__name__)

    def execute(self, request: BookingRequestDTO, user_id: str | None = None) -> BookingCreated:
        if not request.name or not request.email:
            raise ValidationError("Name and email are required")
        if not request.date or not request.time:
            raise ValidationError("Date and time are required")

        services = parse_services(request.service)
        start_hour = parse_start_hour(request.time)
        mehendi_hours = request.mehendi_hours or 0

        check = self._engine.validate_time_slot(request.date, request.time, services, mehendi_hours)
        if not check.available:
            raise SlotConflictError(
                date=request.date,
                conflicting_hour=check.conflicting_hour,
                conflicting_service=check.conflicting_service,
            )

        cancel_token = str(uuid.uuid4())
        booking = Booking(
            date=request.date.strip(),
            services=services,
            time=request.time.strip(),
            start_hour=start_hour,
            mehendi_hours=mehendi_hours,
            name=request.name,
            email=request.email,
            phone=request.phone,
            location=request.location,
            address=request.address,
            notes=request.notes,
            total_price=request.total_price,
            service_pricing=list(request.service_pricing),
            payment_method=request.payment_method,
            payment_status=request.payment_status,
            cancel_token=cancel_token,
            user_id=user_id,
        )
        booking_id = self._store.insert_booking(booking)
        self._logger.info(
            "Booking created",
            extra={"booking_id": booking_id, "date": booking.date, "hour": start_hour, "service": booking.service_label},
        )
        return BookingCreated(
            booking=replace(booking, id=booking_id),
            booking_id=booking_id,
            cancel_token=cancel_token,
        )
