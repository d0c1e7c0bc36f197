"""
Tests for slot validation and day availability against an in-memory store.
"""

from __future__ import annotations

import pytest

from salon.application.exceptions import DependencyError, ValidationError
from salon.application.use_cases.availability import AvailabilityEngine, DayAvailability, SlotCheck
from salon.application.utils.slot_rules import parse_start_hour
from salon.domain.entities.booking import Booking, BookingStatus
from salon.infrastructure.store.memory_store import MemoryBookingStore


DATE = "2025-06-01"
ALL_HOURS = [9, 10, 11, 12, 13, 14, 15, 16, 17, 18]


def _booking(services: str, time: str, mehendi_hours: int = 0, date: str = DATE, **kwargs) -> Booking:
    return Booking(
        date=date,
        services=tuple(s.strip() for s in services.split(",")),
        time=time,
        start_hour=parse_start_hour(time),
        mehendi_hours=mehendi_hours,
        **kwargs,
    )


class FailingStore(MemoryBookingStore):
    def __init__(self) -> None:
        super().__init__()
        self.fetch_calls = 0

    def fetch_bookings_by_date(self, date: str) -> list[Booking]:
        self.fetch_calls += 1
        raise DependencyError("connection refused")


def test_threading_inside_makeup_block_conflicts():
    store = MemoryBookingStore([_booking("makeup", "10:00")])
    engine = AvailabilityEngine(store)

    result = engine.validate_time_slot(DATE, "11:00", ["threading"])

    assert result == SlotCheck(available=False, conflicting_hour=11, conflicting_service="makeup")


def test_free_slot_is_available():
    store = MemoryBookingStore([_booking("makeup", "10:00")])
    engine = AvailabilityEngine(store)

    assert engine.validate_time_slot(DATE, "13:30", "threading") == SlotCheck(available=True)


def test_other_dates_are_ignored():
    store = MemoryBookingStore([_booking("bridal-makeup", "09:00", date="2025-06-02")])
    engine = AvailabilityEngine(store)

    assert engine.validate_time_slot(DATE, "10:00", "makeup").available is True


def test_cancelled_bookings_do_not_block():
    store = MemoryBookingStore([_booking("makeup", "10:00", status=BookingStatus.CANCELLED)])
    engine = AvailabilityEngine(store)

    assert engine.validate_time_slot(DATE, "10:00", "threading").available is True


def test_conflict_reports_first_booking_and_lowest_hour():
    store = MemoryBookingStore([
        _booking("mehendi, threading", "12:00", mehendi_hours=3),
        _booking("lash-lift", "10:00"),
    ])
    engine = AvailabilityEngine(store)

    result = engine.validate_time_slot(DATE, "10:00", "makeup")

    assert result.available is False
    assert result.conflicting_hour == 12
    assert result.conflicting_service == "mehendi"


def test_conflict_outside_schedule_still_counts():
    store = MemoryBookingStore([_booking("makeup", "17:00")])
    engine = AvailabilityEngine(store)

    result = engine.validate_time_slot(DATE, "19:00", "threading")

    assert result.available is False
    assert result.conflicting_hour == 19


def test_conflict_is_symmetric():
    a = _booking("makeup", "10:00")
    b = _booking("mehendi", "12:00", mehendi_hours=2)

    against_b = AvailabilityEngine(MemoryBookingStore([b])).validate_time_slot(
        DATE, a.time, a.services, a.mehendi_hours
    )
    against_a = AvailabilityEngine(MemoryBookingStore([a])).validate_time_slot(
        DATE, b.time, b.services, b.mehendi_hours
    )

    assert against_b.available is False
    assert against_a.available is False


def test_bridal_booking_fills_the_day():
    engine = AvailabilityEngine(MemoryBookingStore([_booking("bridal-makeup", "09:00")]))

    result = engine.get_available_times(DATE, ["threading"])

    assert result == DayAvailability(date=DATE, available_hours=[], unavailable_hours=ALL_HOURS)


def test_empty_day_is_fully_available():
    engine = AvailabilityEngine(MemoryBookingStore())

    result = engine.get_available_times(DATE, "makeup")

    assert result.available_hours == ALL_HOURS
    assert result.unavailable_hours == []


def test_overflowing_mehendi_hours_are_not_reported():
    engine = AvailabilityEngine(MemoryBookingStore([_booking("mehendi", "17:00", mehendi_hours=4)]))

    result = engine.get_available_times(DATE, "threading")

    assert result.unavailable_hours == [17, 18]
    assert result.available_hours == [9, 10, 11, 12, 13, 14, 15, 16]


def test_requested_services_do_not_change_availability():
    store = MemoryBookingStore([_booking("makeup", "10:00"), _booking("threading", "15:00")])
    engine = AvailabilityEngine(store)

    short = engine.get_available_times(DATE, "threading")
    long = engine.get_available_times(DATE, "bridal-makeup")

    assert short == long
    assert short.unavailable_hours == [10, 11, 12, 15]


def test_available_times_is_idempotent():
    engine = AvailabilityEngine(MemoryBookingStore([_booking("makeup", "14:00")]))

    assert engine.get_available_times(DATE, "makeup") == engine.get_available_times(DATE, "makeup")


def test_deleting_a_booking_frees_its_slots():
    store = MemoryBookingStore()
    booking_id = store.insert_booking(_booking("makeup", "10:00"))
    engine = AvailabilityEngine(store)
    assert engine.get_available_times(DATE, "makeup").unavailable_hours == [10, 11, 12]

    store.delete_booking(booking_id)

    assert engine.get_available_times(DATE, "makeup").unavailable_hours == []


@pytest.mark.parametrize(
    "date,time,services,mehendi_hours",
    [
        ("", "10:00", "makeup", 0),
        (DATE, "ten", "makeup", 0),
        (DATE, "10:00", "", 0),
        (DATE, "10:00", [], 0),
        (DATE, "10:00", "mehendi", -2),
    ],
)
def test_validation_happens_before_store_access(date, time, services, mehendi_hours):
    store = FailingStore()
    engine = AvailabilityEngine(store)

    with pytest.raises(ValidationError):
        engine.validate_time_slot(date, time, services, mehendi_hours)
    assert store.fetch_calls == 0


def test_available_times_requires_services():
    store = FailingStore()
    with pytest.raises(ValidationError):
        AvailabilityEngine(store).get_available_times(DATE, "")
    assert store.fetch_calls == 0


def test_store_failures_propagate():
    engine = AvailabilityEngine(FailingStore())

    with pytest.raises(DependencyError):
        engine.validate_time_slot(DATE, "10:00", "makeup")
    with pytest.raises(DependencyError):
        engine.get_available_times(DATE, "makeup")


def test_unknown_services_are_ignored_by_default():
    engine = AvailabilityEngine(MemoryBookingStore([_booking("nails", "10:00")]))

    assert engine.validate_time_slot(DATE, "10:00", "nails").available is True
    assert engine.get_available_times(DATE, "nails").unavailable_hours == []


def test_unknown_services_rejected_in_strict_mode():
    store = FailingStore()
    engine = AvailabilityEngine(store, reject_unknown_services=True)

    with pytest.raises(ValidationError):
        engine.validate_time_slot(DATE, "10:00", "makeup, nails")
    assert store.fetch_calls == 0
