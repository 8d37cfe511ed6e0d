"""Unit tests for the mock payment and seat reservation adapters"""

import pytest

from cinema_ticketing.platform.logging.loguru_io import Logger
from cinema_ticketing.service.ticketing.app.interface import (
    ISeatReservationService,
    ITicketPaymentService,
)
from cinema_ticketing.service.ticketing.driven_adapter.mock_seat_reservation_service import (
    MockSeatReservationService,
)
from cinema_ticketing.service.ticketing.driven_adapter.mock_ticket_payment_service import (
    MockTicketPaymentService,
)


pytestmark = pytest.mark.unit


@pytest.fixture
def log_messages():
    messages: list[str] = []
    handler_id = Logger.base.add(lambda message: messages.append(message.record['message']))
    yield messages
    Logger.base.remove(handler_id)


class TestMockTicketPaymentService:
    def test_implements_payment_interface(self):
        assert isinstance(MockTicketPaymentService(), ITicketPaymentService)

    def test_records_and_logs_payment(self, log_messages: list[str]):
        service = MockTicketPaymentService()

        service.make_payment(account_id=4, amount=325)

        assert service.payments == [(4, 325)]
        assert any('Payment of £325 made for account ID: 4' in m for m in log_messages)


class TestMockSeatReservationService:
    def test_implements_reservation_interface(self):
        assert isinstance(MockSeatReservationService(), ISeatReservationService)

    def test_records_and_logs_reservation(self, log_messages: list[str]):
        service = MockSeatReservationService()

        service.reserve_seat(account_id=4, seat_count=15)

        assert service.reservations == [(4, 15)]
        assert any('Reserved 15 seats for account ID: 4' in m for m in log_messages)
