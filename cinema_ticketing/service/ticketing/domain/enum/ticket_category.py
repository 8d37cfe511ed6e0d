from enum import StrEnum


class TicketCategory(StrEnum):
    """Closed set of ticket categories sold at the box office"""

    ADULT = 'ADULT'
    CHILD = 'CHILD'
    INFANT = 'INFANT'
