from cinema_ticketing.service.ticketing.domain.value_object.purchase_summary import (
    PurchaseSummary,
)
from cinema_ticketing.service.ticketing.domain.value_object.ticket_request import (
    TicketRequest,
    TicketRequestLike,
)


__all__ = ['PurchaseSummary', 'TicketRequest', 'TicketRequestLike']
