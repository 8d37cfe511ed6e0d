"""Mock payment provider for local runs and demos."""

from cinema_ticketing.platform.config.core_setting import settings
from cinema_ticketing.platform.logging.loguru_io import Logger
from cinema_ticketing.service.ticketing.app.interface.i_ticket_payment_service import (
    ITicketPaymentService,
)


class MockTicketPaymentService(ITicketPaymentService):
    """Logs payments instead of charging anyone."""

    def __init__(self) -> None:
        self.payments: list[tuple[int, int]] = []  # Store payments for testing

    @Logger.io
    def make_payment(self, *, account_id: int, amount: int) -> None:
        self.payments.append((account_id, amount))
        Logger.base.info(
            f'💳 Payment of {settings.CURRENCY_SYMBOL}{amount} made for account ID: {account_id}'
        )
