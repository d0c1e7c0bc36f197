from __future__ import annotations

from abc import ABC, abstractmethod

from salon.domain.entities.booking import Booking, BookingStatus


class BookingStorePort(ABC):
    """
    Persistence for bookings. Adapters raise DependencyError when the
    backing service is unreachable or rejects a request.
    """

    @abstractmethod
    def fetch_bookings_by_date(self, date: str) -> list[Booking]:
        """Non-cancelled bookings for `date`, in store order."""
        raise NotImplementedError

    @abstractmethod
    def insert_booking(self, booking: Booking) -> str:
        """Persist a new booking. Returns its id."""
        raise NotImplementedError

    @abstractmethod
    def delete_booking(self, booking_id: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def get_booking(self, booking_id: str) -> Booking | None:
        raise NotImplementedError

    @abstractmethod
    def get_booking_by_token(self, cancel_token: str) -> Booking | None:
        raise NotImplementedError

    @abstractmethod
    def list_bookings_by_user(self, user_id: str) -> list[Booking]:
        """Bookings owned by `user_id`, newest date first."""
        raise NotImplementedError

    @abstractmethod
    def list_bookings(self) -> list[Booking]:
        """All bookings, newest date first."""
        raise NotImplementedError

    @abstractmethod
    def update_booking_status(self, booking_id: str, status: BookingStatus) -> Booking | None:
        """Returns the updated booking, or None if it does not exist."""
        raise NotImplementedError
