from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime, timezone
from itertools import count

from salon.application.ports.booking_store import BookingStorePort
from salon.domain.entities.booking import Booking, BookingStatus


class MemoryBookingStore(BookingStorePort):
    def __init__(self, bookings: list[Booking] | None = None) -> None:
        self._bookings: dict[str, Booking] = {}
        self._ids = count(1)
        self._logger = logging.getLogger(__name__)
        for booking in bookings or []:
            self.insert_booking(booking)

    def fetch_bookings_by_date(self, date: str) -> list[Booking]:
        return [
            b for b in self._bookings.values()
            if b.date == date and b.status != BookingStatus.CANCELLED
        ]

    def insert_booking(self, booking: Booking) -> str:
        booking_id = booking.id or str(next(self._ids))
        self._bookings[booking_id] = replace(
            booking,
            id=booking_id,
            created_at=booking.created_at or datetime.now(timezone.utc).isoformat(),
        )
        self._logger.info("Booking stored in memory", extra={"booking_id": booking_id, "date": booking.date})
        return booking_id

    def delete_booking(self, booking_id: str) -> None:
        self._bookings.pop(booking_id, None)

    def get_booking(self, booking_id: str) -> Booking | None:
        return self._bookings.get(booking_id)

    def get_booking_by_token(self, cancel_token: str) -> Booking | None:
        for booking in self._bookings.values():
            if booking.cancel_token == cancel_token:
                return booking
        return None

    def list_bookings_by_user(self, user_id: str) -> list[Booking]:
        owned = [b for b in self._bookings.values() if b.user_id == user_id]
        return sorted(owned, key=lambda b: b.date, reverse=True)

    def list_bookings(self) -> list[Booking]:
        return sorted(self._bookings.values(), key=lambda b: b.date, reverse=True)

    def update_booking_status(self, booking_id: str, status: BookingStatus) -> Booking | None:
        booking = self._bookings.get(booking_id)
        if booking is None:
            return None
        updated = replace(booking, status=status)
        self._bookings[booking_id] = updated
        return updated
