"""
Price Calculator
Pure totals for an already validated purchase.
"""

from types import MappingProxyType
from typing import Iterable, Mapping

from cinema_ticketing.platform.logging.loguru_io import Logger
from cinema_ticketing.service.ticketing.domain.enum.ticket_category import TicketCategory
from cinema_ticketing.service.ticketing.domain.value_object.purchase_summary import (
    PurchaseSummary,
)
from cinema_ticketing.service.ticketing.domain.value_object.ticket_request import (
    TicketRequestLike,
)


TICKET_PRICES: Mapping[TicketCategory, int] = MappingProxyType(
    {
        TicketCategory.ADULT: 25,
        TicketCategory.CHILD: 15,
        TicketCategory.INFANT: 0,
    }
)

# Infants sit on an adult's lap
_SEATLESS_CATEGORIES = frozenset({TicketCategory.INFANT})


def occupies_seat(category: TicketCategory) -> bool:
    return category not in _SEATLESS_CATEGORIES


def calculate_total_amount(ticket_requests: Iterable[TicketRequestLike]) -> int:
    return sum(TICKET_PRICES[request.category] * request.count for request in ticket_requests)


def calculate_total_seats(ticket_requests: Iterable[TicketRequestLike]) -> int:
    return sum(request.count for request in ticket_requests if occupies_seat(request.category))


@Logger.io
def summarize_purchase(ticket_requests: Iterable[TicketRequestLike]) -> PurchaseSummary:
    requests = tuple(ticket_requests)
    return PurchaseSummary(
        total_tickets=sum(request.count for request in requests),
        total_amount=calculate_total_amount(requests),
        total_seats=calculate_total_seats(requests),
    )
