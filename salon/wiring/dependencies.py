from functools import lru_cache
import logging

from salon.core.config import settings
from salon.application.ports.booking_store import BookingStorePort
from salon.application.ports.notifier import NotifierPort
from salon.application.use_cases.availability import AvailabilityEngine
from salon.application.use_cases.create_booking import CreateBookingUseCase
from salon.application.use_cases.manage_bookings import BookingQueriesUseCase, CancelBookingUseCase
from salon.infrastructure.notifications.brevo_notifier import BrevoNotifier
from salon.infrastructure.notifications.mock_notifier import MockNotifier
from salon.infrastructure.store.memory_store import MemoryBookingStore
from salon.infrastructure.store.supabase_store import SupabaseBookingStore


_booking_store: BookingStorePort | None = None


def get_booking_store() -> BookingStorePort:
    global _booking_store
    if _booking_store is None:
        logger = logging.getLogger(__name__)
        if settings.STORE_PROVIDER.lower() == "supabase":
            logger.info("Using SupabaseBookingStore")
            _booking_store = SupabaseBookingStore()
        else:
            logger.info("Using MemoryBookingStore (STORE_PROVIDER=%s)", settings.STORE_PROVIDER)
            _booking_store = MemoryBookingStore()
    return _booking_store


@lru_cache
def get_notifier() -> NotifierPort:
    if settings.BREVO_API_KEY and settings.BREVO_API_KEY.strip():
        return BrevoNotifier()
    logging.getLogger(__name__).info("Using MockNotifier (BREVO_API_KEY missing)")
    return MockNotifier()


def get_availability_engine() -> AvailabilityEngine:
    return AvailabilityEngine(
        store=get_booking_store(),
        reject_unknown_services=settings.REJECT_UNKNOWN_SERVICES,
    )


def get_create_booking_use_case() -> CreateBookingUseCase:
    return CreateBookingUseCase(engine=get_availability_engine(), store=get_booking_store())


def get_cancel_booking_use_case() -> CancelBookingUseCase:
    return CancelBookingUseCase(store=get_booking_store())


def get_booking_queries_use_case() -> BookingQueriesUseCase:
    return BookingQueriesUseCase(store=get_booking_store())
