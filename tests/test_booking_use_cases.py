"""
Tests for booking creation, cancellation and admin queries.
"""

from __future__ import annotations

import pytest

from salon.application.dto.booking_request import BookingRequestDTO
from salon.application.exceptions import (
    BookingNotFoundError,
    NotAuthorizedError,
    SlotConflictError,
    ValidationError,
)
from salon.application.use_cases.availability import AvailabilityEngine
from salon.application.use_cases.create_booking import CreateBookingUseCase
from salon.application.use_cases.manage_bookings import BookingQueriesUseCase, CancelBookingUseCase
from salon.domain.entities.booking import BookingStatus
from salon.infrastructure.store.memory_store import MemoryBookingStore


DATE = "2025-06-01"


def _request(**overrides) -> BookingRequestDTO:
    payload = {
        "name": "Sara",
        "email": "sara@example.com",
        "phone": "12345678",
        "service": "makeup",
        "date": DATE,
        "time": "10:00",
        "location": "salon",
    }
    payload.update(overrides)
    return BookingRequestDTO.model_validate(payload)


@pytest.fixture
def store() -> MemoryBookingStore:
    return MemoryBookingStore()


@pytest.fixture
def create(store) -> CreateBookingUseCase:
    return CreateBookingUseCase(engine=AvailabilityEngine(store), store=store)


def test_create_booking_stores_it(create, store):
    created = create.execute(_request(service="makeup, threading"), user_id="7")

    stored = store.get_booking(created.booking_id)
    assert stored is not None
    assert stored.services == ("makeup", "threading")
    assert stored.start_hour == 10
    assert stored.user_id == "7"
    assert stored.cancel_token == created.cancel_token
    assert created.booking.id == created.booking_id


def test_create_booking_reads_camel_case_fields(create, store):
    created = create.execute(_request(service="mehendi", mehendiHours=3, totalPrice=450))

    stored = store.get_booking(created.booking_id)
    assert stored.mehendi_hours == 3
    assert stored.total_price == 450


def test_overlapping_booking_is_rejected(create, store):
    create.execute(_request(service="makeup", time="10:00"))

    with pytest.raises(SlotConflictError) as excinfo:
        create.execute(_request(service="threading", time="11:15"))

    assert excinfo.value.conflicting_hour == 11
    assert excinfo.value.conflicting_service == "makeup"
    assert excinfo.value.date == DATE
    assert len(store.fetch_bookings_by_date(DATE)) == 1


def test_adjacent_booking_is_accepted(create, store):
    create.execute(_request(service="makeup", time="10:00"))
    create.execute(_request(service="threading", time="13:00"))

    assert len(store.fetch_bookings_by_date(DATE)) == 2


@pytest.mark.parametrize(
    "overrides",
    [
        {"name": None},
        {"email": ""},
        {"date": None},
        {"time": None},
        {"service": None},
        {"time": "later"},
    ],
)
def test_create_booking_validates_input(create, store, overrides):
    with pytest.raises(ValidationError):
        create.execute(_request(**overrides))
    assert store.list_bookings() == []


def test_cancel_by_token_frees_slot(create, store):
    created = create.execute(_request())
    cancel = CancelBookingUseCase(store)

    booking = cancel.by_token(created.cancel_token)

    assert booking.id == created.booking_id
    assert store.get_booking(created.booking_id) is None
    with pytest.raises(BookingNotFoundError):
        cancel.by_token(created.cancel_token)


def test_cancel_by_token_requires_token(store):
    with pytest.raises(ValidationError):
        CancelBookingUseCase(store).by_token("")


def test_user_can_only_cancel_own_booking(create, store):
    created = create.execute(_request(), user_id="7")
    cancel = CancelBookingUseCase(store)

    with pytest.raises(NotAuthorizedError):
        cancel.by_user(created.booking_id, "8")
    with pytest.raises(BookingNotFoundError):
        cancel.by_user("missing", "7")

    cancel.by_user(created.booking_id, "7")
    assert store.get_booking(created.booking_id) is None


def test_admin_cancel(create, store):
    created = create.execute(_request())
    cancel = CancelBookingUseCase(store)

    cancel.by_admin(created.booking_id)

    with pytest.raises(BookingNotFoundError):
        cancel.by_admin(created.booking_id)


def test_status_update_and_queries(create, store):
    first = create.execute(_request(date="2025-06-01"), user_id="7")
    create.execute(_request(date="2025-07-01"), user_id="7")
    create.execute(_request(date="2025-08-01"), user_id="9")
    queries = BookingQueriesUseCase(store)

    assert [b.date for b in queries.list_for_user("7")] == ["2025-07-01", "2025-06-01"]
    assert len(queries.list_all()) == 3

    updated = queries.update_status(first.booking_id, "cancelled")
    assert updated.status is BookingStatus.CANCELLED
    assert store.fetch_bookings_by_date("2025-06-01") == []

    with pytest.raises(ValidationError):
        queries.update_status(first.booking_id, "archived")
    with pytest.raises(BookingNotFoundError):
        queries.update_status("missing", "completed")
