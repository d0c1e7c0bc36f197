from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from salon.application.exceptions import ValidationError
from salon.application.ports.booking_store import BookingStorePort
from salon.application.utils.slot_rules import (
    BUSINESS_HOURS,
    blocked_hours,
    booking_blocked_hours,
    first_conflict,
    parse_services,
    parse_start_hour,
    unknown_services,
)


@dataclass(frozen=True)
class SlotCheck:
    available: bool
    conflicting_hour: int | None = None
    conflicting_service: str | None = None


@dataclass(frozen=True)
class DayAvailability:
    date: str
    available_hours: list[int]
    unavailable_hours: list[int]


class AvailabilityEngine:
    """
    Works out which hourly slots are free on a date.

    Nothing is cached between calls: every operation re-reads the bookings
    for the date from the store and recomputes blocked hours from scratch.
    """

    def __init__(self, store: BookingStorePort, reject_unknown_services: bool = False) -> None:
        self._store = store
        self._reject_unknown_services = reject_unknown_services
        self._logger = logging.getLogger(__name__)

    def validate_time_slot(
        self,
        date: str,
        time: str | int,
        services: str | Sequence[str],
        mehendi_hours: int | None = 0,
    ) -> SlotCheck:
        date = self._require_date(date)
        start_hour = parse_start_hour(time)
        requested_services = self._check_services(services)
        hours = mehendi_hours or 0
        if hours < 0:
            raise ValidationError("mehendi_hours must not be negative")

        existing = self._store.fetch_bookings_by_date(date)
        requested = blocked_hours(requested_services, start_hour, hours)

        conflict = first_conflict(requested, existing)
        if conflict is None:
            return SlotCheck(available=True)

        booking, hour = conflict
        conflicting_service = booking.services[0] if booking.services else None
        self._logger.info(
            "Slot conflict",
            extra={"date": date, "hour": hour, "service": conflicting_service, "booking_id": booking.id},
        )
        return SlotCheck(
            available=False,
            conflicting_hour=hour,
            conflicting_service=conflicting_service,
        )

    def get_available_times(self, date: str, services: str | Sequence[str]) -> DayAvailability:
        # Blocking comes from bookings already placed; the requested services
        # are validated but do not change the result.
        date = self._require_date(date)
        self._check_services(services)

        blocked: set[int] = set()
        for booking in self._store.fetch_bookings_by_date(date):
            blocked |= booking_blocked_hours(booking)

        unavailable = [h for h in BUSINESS_HOURS if h in blocked]
        available = [h for h in BUSINESS_HOURS if h not in blocked]
        return DayAvailability(date=date, available_hours=available, unavailable_hours=unavailable)

    def _require_date(self, date: str | None) -> str:
        if not date or not str(date).strip():
            raise ValidationError("Date is required")
        return str(date).strip()

    def _check_services(self, services: str | Sequence[str]) -> tuple[str, ...]:
        parsed = parse_services(services)
        unknown = unknown_services(parsed)
        if unknown:
            if self._reject_unknown_services:
                raise ValidationError(f"Unknown services: {', '.join(unknown)}")
            self._logger.warning("Ignoring unknown services", extra={"service": ",".join(unknown)})
        return parsed
