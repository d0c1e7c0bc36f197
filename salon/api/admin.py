from __future__ import annotations

from fastapi import APIRouter, BackgroundTasks, Depends

from salon.api.errors import error_response
from salon.api.schemas import (
    BookingListSchema,
    BookingSchema,
    BookingSummarySchema,
    CancelledResponseSchema,
    StatusUpdateSchema,
)
from salon.api.security import require_admin
from salon.application.exceptions import BookingError
from salon.application.ports.notifier import NotifierPort
from salon.application.use_cases.manage_bookings import BookingQueriesUseCase, CancelBookingUseCase
from salon.wiring.dependencies import (
    get_booking_queries_use_case,
    get_cancel_booking_use_case,
    get_notifier,
)


router = APIRouter(prefix="/admin", dependencies=[Depends(require_admin)])


@router.get("/bookings", response_model=BookingListSchema)
def list_bookings(uc: BookingQueriesUseCase = Depends(get_booking_queries_use_case)):
    try:
        bookings = uc.list_all()
    except BookingError as e:
        return error_response(e)
    return BookingListSchema(
        message="Bookings retrieved successfully",
        bookings=[BookingSchema.from_booking(b) for b in bookings],
    )


@router.put("/bookings/{booking_id}/status", response_model=BookingSchema)
def update_status(
    booking_id: str,
    req: StatusUpdateSchema,
    uc: BookingQueriesUseCase = Depends(get_booking_queries_use_case),
):
    try:
        booking = uc.update_status(booking_id, req.status)
    except BookingError as e:
        return error_response(e)
    return BookingSchema.from_booking(booking)


@router.delete("/bookings/{booking_id}", response_model=CancelledResponseSchema)
def delete_booking(
    booking_id: str,
    background_tasks: BackgroundTasks,
    uc: CancelBookingUseCase = Depends(get_cancel_booking_use_case),
    notifier: NotifierPort = Depends(get_notifier),
):
    try:
        booking = uc.by_admin(booking_id)
    except BookingError as e:
        return error_response(e)

    background_tasks.add_task(notifier.booking_cancelled, booking)
    return CancelledResponseSchema(
        message="Booking cancelled successfully",
        booking=BookingSummarySchema(**booking.summary()),
    )
