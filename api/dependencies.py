"""
FastAPI dependencies.

The ticket service is built once with the default third-party services.
Tests replace it through app.dependency_overrides.
"""

from functools import lru_cache

from services.ticket_service import TicketService
from thirdparty.payment_gateway import TicketPaymentServiceImpl
from thirdparty.seat_booking import SeatReservationServiceImpl


@lru_cache(maxsize=1)
def get_ticket_service() -> TicketService:
    return TicketService(TicketPaymentServiceImpl(), SeatReservationServiceImpl())
