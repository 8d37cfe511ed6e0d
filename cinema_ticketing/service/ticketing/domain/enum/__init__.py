from cinema_ticketing.service.ticketing.domain.enum.ticket_category import TicketCategory


__all__ = ['TicketCategory']
