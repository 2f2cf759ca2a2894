"""
Pytest configuration and shared fixtures.

Adds the project root to the Python path so that tests can import from the
domain, services, thirdparty and api modules.
"""

import sys
from pathlib import Path
from unittest.mock import Mock

import pytest

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from services.ticket_service import TicketService  # noqa: E402
from thirdparty.payment_gateway import TicketPaymentServiceImpl  # noqa: E402
from thirdparty.seat_booking import SeatReservationServiceImpl  # noqa: E402


@pytest.fixture
def payment_service() -> Mock:
    return Mock(spec=TicketPaymentServiceImpl)


@pytest.fixture
def reservation_service() -> Mock:
    return Mock(spec=SeatReservationServiceImpl)


@pytest.fixture
def ticket_service(payment_service: Mock, reservation_service: Mock) -> TicketService:
    return TicketService(payment_service, reservation_service)
