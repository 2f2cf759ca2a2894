"""
Third-party seat booking.

Reserves a number of seats against an account. Calls are assumed to always
succeed.
"""

from __future__ import annotations

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class SeatReservationService(Protocol):
    """Contract for reserving seats."""

    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        ...


class SeatReservationServiceImpl:
    """Stand-in for the external seat booking system."""

    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        logger.info(
            "Seat reservation requested: account_id=%s seats=%s",
            account_id,
            total_seats_to_allocate,
        )


__all__ = [
    "SeatReservationService",
    "SeatReservationServiceImpl",
]
