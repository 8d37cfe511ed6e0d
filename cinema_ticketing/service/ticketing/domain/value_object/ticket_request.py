from typing import Any, Protocol

import attrs

from cinema_ticketing.platform.exception.exceptions import InvalidArgumentError
from cinema_ticketing.service.ticketing.domain.enum.ticket_category import TicketCategory


class TicketRequestLike(Protocol):
    """Anything shaped like a ticket request, including ones built outside TicketRequest"""

    @property
    def category(self) -> Any: ...

    @property
    def count(self) -> int: ...


def _to_ticket_category(value: Any) -> TicketCategory:
    if isinstance(value, TicketCategory):
        return value
    if isinstance(value, str):
        try:
            return TicketCategory(value)
        except ValueError:
            pass
    raise InvalidArgumentError(
        f'category must be one of {", ".join(TicketCategory)}, got {value!r}'
    )


def _validate_count(instance: 'TicketRequest', attribute: attrs.Attribute, value: Any) -> None:
    # bool is an int subclass but never a ticket count
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidArgumentError(f'count must be a positive integer, got {value!r}')


@attrs.define(frozen=True)
class TicketRequest:
    """How many tickets of one category a buyer wants"""

    category: TicketCategory = attrs.field(converter=_to_ticket_category)
    count: int = attrs.field(validator=_validate_count)
