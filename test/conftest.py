"""
Test Configuration and Fixtures

Environment setup MUST happen before any application import, because
settings and the loguru sinks are configured at import time.
"""

import os


def _early_setup_test_environment() -> None:
    os.environ['DEBUG'] = 'true'  # exercise @Logger.io arg/return logging
    os.environ['LOG_TO_FILE'] = 'false'
    os.environ['SERVICE_NAME'] = 'test-cinema-tickets'
    os.environ['CURRENCY_SYMBOL'] = '£'
    # Plain CLI output so assertions see text, not ANSI codes
    os.environ['NO_COLOR'] = '1'
    os.environ.pop('FORCE_COLOR', None)


_early_setup_test_environment()

from collections.abc import Iterator  # noqa: E402
from unittest.mock import Mock  # noqa: E402

import pytest  # noqa: E402

from cinema_ticketing.platform.config.di import container  # noqa: E402
from cinema_ticketing.service.ticketing.app.command.purchase_tickets_use_case import (  # noqa: E402
    PurchaseTicketsUseCase,
)
from cinema_ticketing.service.ticketing.app.interface import (  # noqa: E402
    ISeatReservationService,
    ITicketPaymentService,
)


@pytest.fixture
def collaborator_calls() -> list[str]:
    """Names of collaborator calls in the order they happened"""
    return []


@pytest.fixture
def mock_payment_service(collaborator_calls: list[str]) -> Mock:
    service = Mock(spec=ITicketPaymentService)
    service.make_payment.side_effect = lambda **kwargs: collaborator_calls.append('make_payment')
    return service


@pytest.fixture
def mock_seat_reservation_service(collaborator_calls: list[str]) -> Mock:
    service = Mock(spec=ISeatReservationService)
    service.reserve_seat.side_effect = lambda **kwargs: collaborator_calls.append('reserve_seat')
    return service


@pytest.fixture
def purchase_tickets_use_case(
    mock_payment_service: Mock, mock_seat_reservation_service: Mock
) -> PurchaseTicketsUseCase:
    return PurchaseTicketsUseCase(
        payment_service=mock_payment_service,
        seat_reservation_service=mock_seat_reservation_service,
    )


@pytest.fixture
def overridden_container(
    mock_payment_service: Mock, mock_seat_reservation_service: Mock
) -> Iterator[None]:
    """Point the DI container at the mock collaborators for the duration of a test"""
    with (
        container.ticket_payment_service.override(mock_payment_service),
        container.seat_reservation_service.override(mock_seat_reservation_service),
    ):
        yield
    container.unwire()
