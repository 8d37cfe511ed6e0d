"""
Seat Reservation Service Interface

External seat booking system used by the purchase flow.
"""

from abc import ABC, abstractmethod


class ISeatReservationService(ABC):
    @abstractmethod
    def reserve_seat(self, *, account_id: int, seat_count: int) -> None:
        """
        Reserve seats for an account

        Args:
            account_id: Positive account identifier
            seat_count: Non-negative number of seats (infants excluded)
        """
        pass
