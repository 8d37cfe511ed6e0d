"""
https://python-dependency-injector.ets-labs.org/index.html
"""

from dependency_injector import containers, providers

from cinema_ticketing.service.ticketing.driven_adapter.mock_seat_reservation_service import (
    MockSeatReservationService,
)
from cinema_ticketing.service.ticketing.driven_adapter.mock_ticket_payment_service import (
    MockTicketPaymentService,
)


class Container(containers.DeclarativeContainer):
    # External collaborators, swap for real gateways here
    ticket_payment_service = providers.Singleton(MockTicketPaymentService)
    seat_reservation_service = providers.Singleton(MockSeatReservationService)


container = Container()
