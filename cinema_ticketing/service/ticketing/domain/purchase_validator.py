"""
Purchase Validator
Business rules a ticket purchase must satisfy before any payment is taken.

Checks run in a fixed order, so when several rules are broken the first one
below is the one reported:
1. account id is a positive integer
2. no more than MAX_TICKETS_PER_PURCHASE tickets in total
3. CHILD / INFANT tickets only alongside at least one ADULT ticket
4. every category is a known TicketCategory
"""

from typing import Any, Iterable

from cinema_ticketing.platform.exception.exceptions import (
    InvalidPurchaseError,
    PurchaseRejectionReason,
)
from cinema_ticketing.platform.logging.loguru_io import Logger
from cinema_ticketing.service.ticketing.domain.enum.ticket_category import TicketCategory
from cinema_ticketing.service.ticketing.domain.value_object.ticket_request import (
    TicketRequestLike,
)


MAX_TICKETS_PER_PURCHASE = 25

_DEPENDENT_CATEGORIES = (TicketCategory.CHILD, TicketCategory.INFANT)


def _is_one_of(category: Any, members: Iterable[TicketCategory]) -> bool:
    # Equality only, untrusted categories may be unhashable
    return any(category == member for member in members)


def validate_account_id(account_id: Any) -> None:
    if isinstance(account_id, bool) or not isinstance(account_id, int) or account_id <= 0:
        raise InvalidPurchaseError(PurchaseRejectionReason.INVALID_ACCOUNT, 'Invalid account ID')


def count_tickets(ticket_requests: Iterable[TicketRequestLike]) -> int:
    return sum(request.count for request in ticket_requests)


def _validate_ticket_limit(ticket_requests: tuple[TicketRequestLike, ...]) -> None:
    if count_tickets(ticket_requests) > MAX_TICKETS_PER_PURCHASE:
        raise InvalidPurchaseError(
            PurchaseRejectionReason.TICKET_LIMIT_EXCEEDED,
            f'Cannot purchase more than {MAX_TICKETS_PER_PURCHASE} tickets',
        )


def _validate_adult_present(ticket_requests: tuple[TicketRequestLike, ...]) -> None:
    has_adult = any(request.category == TicketCategory.ADULT for request in ticket_requests)
    has_child_or_infant = any(
        _is_one_of(request.category, _DEPENDENT_CATEGORIES) for request in ticket_requests
    )
    if has_child_or_infant and not has_adult:
        raise InvalidPurchaseError(
            PurchaseRejectionReason.ADULT_REQUIRED,
            'Child or Infant tickets cannot be purchased without an Adult ticket',
        )


def _validate_categories(ticket_requests: tuple[TicketRequestLike, ...]) -> None:
    # TicketRequest already rejects unknown categories, but requests may be built elsewhere
    for request in ticket_requests:
        if not _is_one_of(request.category, TicketCategory):
            raise InvalidPurchaseError(
                PurchaseRejectionReason.UNKNOWN_CATEGORY,
                f'Invalid ticket type: {request.category}',
            )


@Logger.io
def validate_purchase(account_id: Any, ticket_requests: Iterable[TicketRequestLike]) -> None:
    """
    Validate a purchase without side effects

    Args:
        account_id: Account making the purchase, must be a positive integer
        ticket_requests: Requested tickets, possibly empty

    Raises:
        InvalidPurchaseError: Tagged with the first broken rule
    """
    requests = tuple(ticket_requests)
    validate_account_id(account_id)
    _validate_ticket_limit(requests)
    _validate_adult_present(requests)
    _validate_categories(requests)
