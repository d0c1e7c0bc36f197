from abc import ABC, abstractmethod

from salon.domain.entities.booking import Booking


class NotifierPort(ABC):
    @abstractmethod
    def booking_confirmed(self, booking: Booking) -> None:
        raise NotImplementedError

    @abstractmethod
    def booking_cancelled(self, booking: Booking) -> None:
        raise NotImplementedError
