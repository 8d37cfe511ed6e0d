"""
Ticket Payment Service Interface

External payment provider used by the purchase flow.
"""

from abc import ABC, abstractmethod


class ITicketPaymentService(ABC):
    @abstractmethod
    def make_payment(self, *, account_id: int, amount: int) -> None:
        """
        Charge an account for a ticket purchase

        Args:
            account_id: Positive account identifier
            amount: Non-negative total to charge

        Any exception raised here aborts the purchase and reaches the caller unchanged.
        """
        pass
