"""
Domain: Ticket type requests.

Contract excerpts implemented here:
- There are exactly three ticket types: ADULT, CHILD and INFANT.
- A purchaser declares how many tickets of a type they want; a request for
  zero or a negative number of tickets is not a request.
- A TicketTypeRequest is immutable once created.

Construction failures raise ValueError. They are kept separate from the
business-rule failures raised while processing a purchase.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TicketType(str, Enum):
    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"


@dataclass(frozen=True, slots=True)
class TicketTypeRequest:
    """
    Immutable request for a number of tickets of a single type.

    Invariants:
    - ticket_type is a TicketType member (never None).
    - no_of_tickets is an integer >= 1.
    """

    ticket_type: TicketType
    no_of_tickets: int

    def __post_init__(self) -> None:
        if self.ticket_type is None:
            raise ValueError("Ticket type cannot be None")
        if not isinstance(self.ticket_type, TicketType):
            raise ValueError(f"Unknown ticket type: {self.ticket_type!r}")
        # bool is an int subclass; True is not a ticket count
        if isinstance(self.no_of_tickets, bool) or not isinstance(self.no_of_tickets, int):
            raise ValueError(
                f"Number of tickets must be an integer. Value provided: {self.no_of_tickets!r}"
            )
        if self.no_of_tickets <= 0:
            raise ValueError(
                f"Number of tickets must be greater than zero. Value provided: {self.no_of_tickets}"
            )


__all__ = [
    "TicketType",
    "TicketTypeRequest",
]
