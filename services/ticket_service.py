"""
Ticket service for validating and processing ticket purchases.

Handles:
- Account and request validation (fail fast, before any totals are computed)
- Aggregation of ticket requests into totals (tickets, seats, amount due)
- Business rule checks on the totals
- Payment and seat reservation through the third-party services

Business rules:
- At most 25 tickets per purchase.
- Child and Infant tickets need at least one Adult ticket in the same purchase.
- Infants sit on an adult's lap: no more infants than adults.
- Infants pay nothing and are not allocated a seat.

Nothing is charged or reserved unless every rule passes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from domain.errors import ConfigurationError, InvalidPurchaseError
from domain.ticket_type_request import TicketType, TicketTypeRequest
from thirdparty.payment_gateway import TicketPaymentService
from thirdparty.seat_booking import SeatReservationService

logger = logging.getLogger(__name__)

# Prices are in pence
ADULT_TICKET_PRICE = 2500
CHILD_TICKET_PRICE = 1500
INFANT_TICKET_PRICE = 0

MAX_TICKETS_PER_PURCHASE = 25
MIN_VALID_ACCOUNT_ID = 1


@dataclass(frozen=True, slots=True)
class PurchaseTotals:
    """
    Totals aggregated from the ticket requests of a single purchase.

    total_seats_to_allocate: adults + children (infants have no seat)
    total_amount_to_pay: amount due in pence
    """
    total_tickets: int
    total_seats_to_allocate: int
    total_amount_to_pay: int
    adult_tickets: int
    child_tickets: int
    infant_tickets: int


class TicketService:
    """Validates ticket purchases and hands them to payment and seat booking."""

    def __init__(
        self,
        payment_service: Optional[TicketPaymentService],
        reservation_service: Optional[SeatReservationService],
    ):
        if payment_service is None:
            raise ConfigurationError("TicketPaymentService cannot be None")
        if reservation_service is None:
            raise ConfigurationError("SeatReservationService cannot be None")
        self._payment_service = payment_service
        self._reservation_service = reservation_service

    def purchase_tickets(self, account_id: Optional[int], *ticket_type_requests: TicketTypeRequest) -> None:
        """
        Purchase tickets for an account.

        Process:
        1. Validate the account ID
        2. Validate that at least one ticket request was given
        3. Aggregate the requests into totals
        4. Check the totals against the business rules
        5. Take payment for the amount due (if any)
        6. Reserve seats (if any)

        Args:
            account_id: Account making the purchase (must be >= 1)
            *ticket_type_requests: One or more TicketTypeRequest values

        Raises:
            InvalidPurchaseError: If any validation or business rule fails.
                Neither third-party service is called in that case.

        Example:
            service = TicketService(TicketPaymentServiceImpl(), SeatReservationServiceImpl())
            service.purchase_tickets(
                42,
                TicketTypeRequest(TicketType.ADULT, 2),
                TicketTypeRequest(TicketType.CHILD, 1),
            )
            # Charges 6500 pence and reserves 3 seats
        """
        try:
            _validate_account_id(account_id)
            totals = self.calculate_totals(*ticket_type_requests)
        except InvalidPurchaseError as e:
            logger.warning("Purchase rejected for account_id=%s: %s", account_id, e.reason)
            raise

        if totals.total_amount_to_pay > 0:
            self._payment_service.make_payment(account_id, totals.total_amount_to_pay)

        if totals.total_seats_to_allocate > 0:
            self._reservation_service.reserve_seat(account_id, totals.total_seats_to_allocate)

        logger.info(
            "Purchase completed: account_id=%s tickets=%s amount_pence=%s seats=%s",
            account_id,
            totals.total_tickets,
            totals.total_amount_to_pay,
            totals.total_seats_to_allocate,
        )

    def calculate_totals(self, *ticket_type_requests: TicketTypeRequest) -> PurchaseTotals:
        """
        Aggregate and validate ticket requests without charging or reserving.

        Returns:
            PurchaseTotals that satisfy every business rule

        Raises:
            InvalidPurchaseError: If the requests are missing or break a rule.
        """
        _validate_ticket_requests(ticket_type_requests)
        totals = _aggregate(ticket_type_requests)
        _validate_business_rules(totals)
        return totals


def _validate_account_id(account_id: Optional[int]) -> None:
    if (
        account_id is None
        or isinstance(account_id, bool)
        or not isinstance(account_id, int)
        or account_id < MIN_VALID_ACCOUNT_ID
    ):
        raise InvalidPurchaseError("Account ID is invalid. Must be greater than zero.")


def _validate_ticket_requests(ticket_type_requests: tuple) -> None:
    # purchase_tickets(account_id, None) arrives as (None,), an empty list as ([],)
    if (
        not ticket_type_requests
        or ticket_type_requests == (None,)
        or (len(ticket_type_requests) == 1 and ticket_type_requests[0] in ([], ()))
    ):
        raise InvalidPurchaseError("At least one ticket type must be requested.")
    for request in ticket_type_requests:
        if not isinstance(request, TicketTypeRequest):
            raise InvalidPurchaseError(
                f"Invalid ticket request: {request!r}. Expected a TicketTypeRequest."
            )


def _aggregate(ticket_type_requests: tuple) -> PurchaseTotals:
    total_tickets = 0
    total_seats = 0
    total_amount = 0
    adult_tickets = 0
    child_tickets = 0
    infant_tickets = 0

    for request in ticket_type_requests:
        count = request.no_of_tickets
        total_tickets += count

        if request.ticket_type is TicketType.ADULT:
            adult_tickets += count
            total_amount += count * ADULT_TICKET_PRICE
            total_seats += count
        elif request.ticket_type is TicketType.CHILD:
            child_tickets += count
            total_amount += count * CHILD_TICKET_PRICE
            total_seats += count
        elif request.ticket_type is TicketType.INFANT:
            infant_tickets += count
            total_amount += count * INFANT_TICKET_PRICE
        else:
            raise AssertionError(f"Unhandled ticket type: {request.ticket_type!r}")

    return PurchaseTotals(
        total_tickets=total_tickets,
        total_seats_to_allocate=total_seats,
        total_amount_to_pay=total_amount,
        adult_tickets=adult_tickets,
        child_tickets=child_tickets,
        infant_tickets=infant_tickets,
    )


def _validate_business_rules(totals: PurchaseTotals) -> None:
    """
    Check aggregated totals against the purchase rules, in order.

    The zero-ticket and negative amount/seat checks cannot trigger with the
    current aggregation; they guard against changes to it.
    """
    if totals.total_tickets > MAX_TICKETS_PER_PURCHASE:
        raise InvalidPurchaseError(
            f"Cannot purchase more than {MAX_TICKETS_PER_PURCHASE} tickets at a time. "
            f"Requested: {totals.total_tickets}"
        )

    if (totals.child_tickets > 0 or totals.infant_tickets > 0) and totals.adult_tickets == 0:
        raise InvalidPurchaseError(
            "Child or Infant tickets cannot be purchased without purchasing at least one Adult ticket."
        )

    if totals.total_tickets <= 0:
        raise InvalidPurchaseError("Cannot make a purchase request for zero tickets.")

    if totals.total_amount_to_pay < 0:
        raise InvalidPurchaseError("Internal Error: Calculated payment amount is negative.")
    if totals.total_seats_to_allocate < 0:
        raise InvalidPurchaseError("Internal Error: Calculated seat allocation is negative.")

    if totals.infant_tickets > totals.adult_tickets:
        raise InvalidPurchaseError(
            f"Number of infants ({totals.infant_tickets}) cannot exceed the number of "
            f"adults ({totals.adult_tickets}). Please ensure there is an adult lap for each infant."
        )


__all__ = [
    "ADULT_TICKET_PRICE",
    "CHILD_TICKET_PRICE",
    "INFANT_TICKET_PRICE",
    "MAX_TICKETS_PER_PURCHASE",
    "PurchaseTotals",
    "TicketService",
]
