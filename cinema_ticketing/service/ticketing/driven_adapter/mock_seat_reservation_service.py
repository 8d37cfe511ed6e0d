"""Mock seat booking system for local runs and demos."""

from cinema_ticketing.platform.logging.loguru_io import Logger
from cinema_ticketing.service.ticketing.app.interface.i_seat_reservation_service import (
    ISeatReservationService,
)


class MockSeatReservationService(ISeatReservationService):
    """Logs reservations instead of holding real seats."""

    def __init__(self) -> None:
        self.reservations: list[tuple[int, int]] = []

    @Logger.io
    def reserve_seat(self, *, account_id: int, seat_count: int) -> None:
        self.reservations.append((account_id, seat_count))
        Logger.base.info(f'💺 Reserved {seat_count} seats for account ID: {account_id}')
