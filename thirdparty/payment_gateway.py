"""
Third-party payment gateway.

The gateway charges an account a total amount in pence. Calls are assumed to
always succeed; there is no result to inspect.
"""

from __future__ import annotations

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class TicketPaymentService(Protocol):
    """Contract for charging an account."""

    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        ...


class TicketPaymentServiceImpl:
    """
    Stand-in for the external payment provider.

    Records the charge in the log and returns.
    """

    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        logger.info(
            "Payment requested: account_id=%s amount_pence=%s",
            account_id,
            total_amount_to_pay,
        )


__all__ = [
    "TicketPaymentService",
    "TicketPaymentServiceImpl",
]
