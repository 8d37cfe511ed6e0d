from typing import Self, Sequence

from dependency_injector.wiring import Provide, inject

from cinema_ticketing.platform.config.di import Container
from cinema_ticketing.platform.logging.loguru_io import Logger
from cinema_ticketing.service.ticketing.app.interface.i_seat_reservation_service import (
    ISeatReservationService,
)
from cinema_ticketing.service.ticketing.app.interface.i_ticket_payment_service import (
    ITicketPaymentService,
)
from cinema_ticketing.service.ticketing.domain.price_calculator import summarize_purchase
from cinema_ticketing.service.ticketing.domain.purchase_validator import validate_purchase
from cinema_ticketing.service.ticketing.domain.value_object.ticket_request import (
    TicketRequestLike,
)


class PurchaseTicketsUseCase:
    """
    Purchase tickets use case

    Flow:
    1. Validate account id and ticket requests (Fail Fast)
    2. Calculate total amount and seats to reserve
    3. Take payment
    4. Reserve seats

    A reservation failure after a successful payment is not compensated;
    whoever owns the collaborators owns the refund.
    """

    def __init__(
        self,
        *,
        payment_service: ITicketPaymentService,
        seat_reservation_service: ISeatReservationService,
    ) -> None:
        self.payment_service = payment_service
        self.seat_reservation_service = seat_reservation_service

    @classmethod
    @inject
    def depends(
        cls,
        payment_service: ITicketPaymentService = Provide[Container.ticket_payment_service],
        seat_reservation_service: ISeatReservationService = Provide[
            Container.seat_reservation_service
        ],
    ) -> Self:
        return cls(
            payment_service=payment_service,
            seat_reservation_service=seat_reservation_service,
        )

    @Logger.io
    def purchase_tickets(
        self, *, account_id: int, ticket_requests: Sequence[TicketRequestLike]
    ) -> None:
        """
        Raises:
            InvalidPurchaseError: If the purchase breaks a business rule; no collaborator is called
        """
        requests = tuple(ticket_requests)
        validate_purchase(account_id, requests)

        summary = summarize_purchase(requests)
        Logger.base.info(
            f'🎟️ [PURCHASE] account {account_id}: tickets={summary.total_tickets}, '
            f'amount={summary.total_amount}, seats={summary.total_seats}'
        )

        # Payment strictly before reservation
        self.payment_service.make_payment(account_id=account_id, amount=summary.total_amount)
        self.seat_reservation_service.reserve_seat(
            account_id=account_id, seat_count=summary.total_seats
        )
