from __future__ import annotations

import logging

from salon.application.ports.notifier import NotifierPort
from salon.domain.entities.booking import Booking


class MockNotifier(NotifierPort):
    def __init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        self.sent: list[tuple[str, str | None]] = []

    def booking_confirmed(self, booking: Booking) -> None:
        self.sent.append(("confirmed", booking.id))
        self._logger.info(
            "Mock booking confirmation", extra={"booking_id": booking.id, "email": booking.email}
        )

    def booking_cancelled(self, booking: Booking) -> None:
        self.sent.append(("cancelled", booking.id))
        self._logger.info(
            "Mock booking cancellation", extra={"booking_id": booking.id, "email": booking.email}
        )
