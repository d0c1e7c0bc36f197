from __future__ import annotations

import logging

from salon.application.exceptions import BookingNotFoundError, NotAuthorizedError, ValidationError
from salon.application.ports.booking_store import BookingStorePort
from salon.domain.entities.booking import Booking, BookingStatus


class CancelBookingUseCase:
    """Cancelling removes the booking, which frees its slots immediately."""

    def __init__(self, store: BookingStorePort) -> None:
        self._store = store
        self._logger = logging.getLogger(__name__)

    def by_token(self, cancel_token: str | None) -> Booking:
        if not cancel_token:
            raise ValidationError("Cancel token is required")
        booking = self._store.get_booking_by_token(cancel_token)
        if booking is None or booking.id is None:
            raise BookingNotFoundError("Booking not found or already cancelled")
        return self._delete(booking, reason="token")

    def by_user(self, booking_id: str, user_id: str) -> Booking:
        if not booking_id:
            raise ValidationError("Booking ID is required")
        booking = self._store.get_booking(booking_id)
        if booking is None:
            raise BookingNotFoundError("Booking not found")
        if booking.user_id != user_id:
            raise NotAuthorizedError("Not authorized to cancel this booking")
        return self._delete(booking, reason="user")

    def by_admin(self, booking_id: str) -> Booking:
        booking = self._store.get_booking(booking_id)
        if booking is None:
            raise BookingNotFoundError("Booking not found")
        return self._delete(booking, reason="admin")

    def _delete(self, booking: Booking, reason: str) -> Booking:
        self._store.delete_booking(booking.id)
        self._logger.info(
            "Booking cancelled",
            extra={"booking_id": booking.id, "date": booking.date, "reason": reason},
        )
        return booking


class BookingQueriesUseCase:
    def __init__(self, store: BookingStorePort) -> None:
        self._store = store
        self._logger = logging.getLogger(__name__)

    def list_for_user(self, user_id: str) -> list[Booking]:
        bookings = self._store.list_bookings_by_user(user_id)
        self._logger.info("Fetched user bookings", extra={"user_id": user_id, "count": len(bookings)})
        return bookings

    def list_all(self) -> list[Booking]:
        return self._store.list_bookings()

    def update_status(self, booking_id: str, status: str) -> Booking:
        try:
            new_status = BookingStatus(status)
        except ValueError:
            allowed = ", ".join(s.value for s in BookingStatus)
            raise ValidationError(f"Invalid status {status!r}; expected one of: {allowed}")

        booking = self._store.update_booking_status(booking_id, new_status)
        if booking is None:
            raise BookingNotFoundError("Booking not found")
        self._logger.info("Booking status updated", extra={"booking_id": booking_id, "reason": new_status.value})
        return booking
