import attrs


@attrs.define(frozen=True)
class PurchaseSummary:
    """Derived totals of one purchase, computed per call and never stored"""

    total_tickets: int
    total_amount: int
    total_seats: int
