from __future__ import annotations

from fastapi import APIRouter, BackgroundTasks, Depends, Query

from salon.api.errors import error_response
from salon.api.schemas import (
    AvailableTimesResponseSchema,
    BookingCreatedSchema,
    BookingListSchema,
    BookingSchema,
    BookingSummarySchema,
    CancelledResponseSchema,
    UnbookRequestSchema,
    ValidateSlotRequestSchema,
    ValidateSlotResponseSchema,
)
from salon.api.security import optional_user, require_user
from salon.application.dto.booking_request import BookingRequestDTO
from salon.application.exceptions import BookingError, ValidationError
from salon.application.ports.notifier import NotifierPort
from salon.application.use_cases.availability import AvailabilityEngine
from salon.application.use_cases.create_booking import CreateBookingUseCase
from salon.application.use_cases.manage_bookings import BookingQueriesUseCase, CancelBookingUseCase
from salon.wiring.dependencies import (
    get_availability_engine,
    get_booking_queries_use_case,
    get_cancel_booking_use_case,
    get_create_booking_use_case,
    get_notifier,
)


router = APIRouter()


@router.get("/available-times", response_model=AvailableTimesResponseSchema)
def available_times(
    date: str | None = Query(None),
    services: str | None = Query(None),
    engine: AvailabilityEngine = Depends(get_availability_engine),
):
    if not date or not services:
        return error_response(ValidationError("Date and services are required"))
    try:
        result = engine.get_available_times(date, services)
    except BookingError as e:
        return error_response(e)
    return AvailableTimesResponseSchema(
        date=result.date,
        available_hours=result.available_hours,
        unavailable_hours=result.unavailable_hours,
    )


@router.post("/booking/validate", response_model=ValidateSlotResponseSchema)
def validate_slot(
    req: ValidateSlotRequestSchema,
    engine: AvailabilityEngine = Depends(get_availability_engine),
):
    try:
        check = engine.validate_time_slot(req.date, req.time, req.service, req.mehendi_hours)
    except BookingError as e:
        return error_response(e)
    return ValidateSlotResponseSchema(
        available=check.available,
        conflicting_hour=check.conflicting_hour,
        conflicting_service=check.conflicting_service,
    )


@router.post("/booking", response_model=BookingCreatedSchema)
def create_booking(
    req: BookingRequestDTO,
    background_tasks: BackgroundTasks,
    user_id: str | None = Depends(optional_user),
    uc: CreateBookingUseCase = Depends(get_create_booking_use_case),
    notifier: NotifierPort = Depends(get_notifier),
):
    try:
        created = uc.execute(req, user_id=user_id)
    except BookingError as e:
        return error_response(e)

    background_tasks.add_task(notifier.booking_confirmed, created.booking)
    return BookingCreatedSchema(
        message="Booking saved successfully. Confirmation email will be sent shortly.",
        booking_id=created.booking_id,
        cancel_token=created.cancel_token,
    )


@router.get("/booking/my-bookings", response_model=BookingListSchema)
def my_bookings(
    user_id: str = Depends(require_user),
    uc: BookingQueriesUseCase = Depends(get_booking_queries_use_case),
):
    try:
        bookings = uc.list_for_user(user_id)
    except BookingError as e:
        return error_response(e)
    return BookingListSchema(
        message="Bookings retrieved successfully",
        bookings=[BookingSchema.from_booking(b) for b in bookings],
    )


@router.post("/booking/cancel/{booking_id}", response_model=CancelledResponseSchema)
def cancel_own_booking(
    booking_id: str,
    background_tasks: BackgroundTasks,
    user_id: str = Depends(require_user),
    uc: CancelBookingUseCase = Depends(get_cancel_booking_use_case),
    notifier: NotifierPort = Depends(get_notifier),
):
    try:
        booking = uc.by_user(booking_id, user_id)
    except BookingError as e:
        return error_response(e)

    background_tasks.add_task(notifier.booking_cancelled, booking)
    return CancelledResponseSchema(
        message="Booking cancelled successfully",
        booking=BookingSummarySchema(**booking.summary()),
    )


@router.post("/unbook", response_model=CancelledResponseSchema)
def unbook(
    req: UnbookRequestSchema,
    background_tasks: BackgroundTasks,
    uc: CancelBookingUseCase = Depends(get_cancel_booking_use_case),
    notifier: NotifierPort = Depends(get_notifier),
):
    try:
        booking = uc.by_token(req.token)
    except BookingError as e:
        return error_response(e)

    background_tasks.add_task(notifier.booking_cancelled, booking)
    return CancelledResponseSchema(
        message="Booking cancelled successfully",
        booking=BookingSummarySchema(**booking.summary()),
    )
