class BookingError(RuntimeError):
    """Base class for errors raised by the booking application layer."""
    pass


class ValidationError(BookingError):
    """Raised when a request is malformed (missing date, empty services, bad time)."""
    pass


class DependencyError(BookingError):
    """Raised when the booking store is unreachable or rejects a request. Retryable."""
    pass


class BookingNotFoundError(BookingError):
    pass


class NotAuthorizedError(BookingError):
    pass


class SlotConflictError(BookingError):
    """Raised when the requested slot overlaps an existing booking on the same date."""

    def __init__(self, date: str, conflicting_hour: int | None, conflicting_service: str | None) -> None:
        super().__init__(
            "This time slot is already booked. Please select a different date or time."
        )
        self.date = date
        self.conflicting_hour = conflicting_hour
        self.conflicting_service = conflicting_service
