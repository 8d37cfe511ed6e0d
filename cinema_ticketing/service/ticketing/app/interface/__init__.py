from cinema_ticketing.service.ticketing.app.interface.i_seat_reservation_service import (
    ISeatReservationService,
)
from cinema_ticketing.service.ticketing.app.interface.i_ticket_payment_service import (
    ITicketPaymentService,
)


__all__ = ['ISeatReservationService', 'ITicketPaymentService']
