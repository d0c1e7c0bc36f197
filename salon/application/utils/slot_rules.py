from __future__ import annotations

import re
from typing import Iterable, Sequence

from salon.application.exceptions import ValidationError
from salon.domain.entities.booking import Booking
from salon.domain.entities.service import (
    ConfigurableDuration,
    FixedDuration,
    NoBlock,
    ServiceId,
    WholeDay,
    policy_for,
)


BUSINESS_HOURS: tuple[int, ...] = tuple(range(9, 19))

_TIME_PATTERN = re.compile(r"^\s*(\d{1,2})(?::(\d{1,2})(?::(\d{1,2}))?)?\s*$")


def parse_start_hour(time_str: str | int | None) -> int:
    """
    Extract the hour from an "HH:MM" or "HH:MM:SS" string. Minutes and seconds are discarded.
    Integers are accepted as an already-parsed hour.
    """
    if isinstance(time_str, bool):
        raise ValidationError(f"Invalid time: {time_str!r}")
    if isinstance(time_str, int):
        hour = time_str
    else:
        match = _TIME_PATTERN.match(time_str or "")
        if not match:
            raise ValidationError(f"Invalid time: {time_str!r}")
        hour = int(match.group(1))
    if not 0 <= hour <= 23:
        raise ValidationError(f"Invalid time: {time_str!r}")
    return hour


def parse_services(raw: str | Sequence[str] | None) -> tuple[str, ...]:
    """Split a comma separated service string (or a list of tags) into trimmed ids."""
    if raw is None:
        parts: Iterable[str] = []
    elif isinstance(raw, str):
        parts = raw.split(",")
    else:
        parts = (piece for item in raw for piece in str(item).split(","))
    services = tuple(p.strip() for p in parts if p and p.strip())
    if not services:
        raise ValidationError("At least one service is required")
    return services


def unknown_services(services: Iterable[str]) -> list[str]:
    return [s for s in services if ServiceId.parse(s) is ServiceId.OTHER]


def blocked_hours(services: Iterable[str], start_hour: int, mehendi_hours: int = 0) -> frozenset[int]:
    """
    Hours occupied by a booking of `services` starting at `start_hour`.

    Results are not clipped to BUSINESS_HOURS, so a makeup booking at 17
    also blocks 19.
    """
    blocked: set[int] = set()
    for raw in services:
        policy = policy_for(ServiceId.parse(raw))
        if isinstance(policy, WholeDay):
            blocked.update(BUSINESS_HOURS)
        elif isinstance(policy, FixedDuration):
            blocked.update(range(start_hour, start_hour + policy.hours))
        elif isinstance(policy, ConfigurableDuration):
            hours = mehendi_hours or policy.default_hours
            blocked.update(range(start_hour, start_hour + hours))
        elif isinstance(policy, NoBlock):
            continue
    return frozenset(blocked)


def booking_blocked_hours(booking: Booking) -> frozenset[int]:
    if booking.start_hour is None:
        return frozenset()
    return blocked_hours(booking.services, booking.start_hour, booking.mehendi_hours)


def first_conflict(requested: frozenset[int], existing: Sequence[Booking]) -> tuple[Booking, int] | None:
    """
    First existing booking whose blocked hours intersect `requested`, with the
    lowest shared hour. Bookings are scanned in the order given.
    """
    for booking in existing:
        for hour in sorted(booking_blocked_hours(booking)):
            if hour in requested:
                return booking, hour
    return None
