#!/usr/bin/env python3
"""
Ticket Purchase Script

Purchases tickets for an account using the default payment and seat booking
services, then prints the totals.

Usage:
    python purchase_tickets.py 42 --adult 2
    python purchase_tickets.py 42 --adult 2 --child 4
    python purchase_tickets.py 42 --adult 1 --infant 1 --log-level DEBUG
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from config import configure_logging
from domain.errors import InvalidPurchaseError
from domain.ticket_type_request import TicketType, TicketTypeRequest
from services.ticket_service import TicketService
from thirdparty.payment_gateway import TicketPaymentServiceImpl
from thirdparty.seat_booking import SeatReservationServiceImpl


def build_requests(adult: int, child: int, infant: int) -> List[TicketTypeRequest]:
    """Build one request per ticket type with a non-zero count."""
    counts = (
        (TicketType.ADULT, adult),
        (TicketType.CHILD, child),
        (TicketType.INFANT, infant),
    )
    return [
        TicketTypeRequest(ticket_type, count)
        for ticket_type, count in counts
        if count != 0
    ]


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Purchase adult, child and infant tickets for an account",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Three adults
  python purchase_tickets.py 42 --adult 3

  # Family purchase
  python purchase_tickets.py 42 --adult 2 --child 2 --infant 1
        """
    )

    parser.add_argument(
        "account_id",
        type=int,
        help="Account making the purchase"
    )

    parser.add_argument(
        "--adult",
        "-a",
        type=int,
        default=0,
        help="Number of adult tickets (default: 0)"
    )

    parser.add_argument(
        "--child",
        "-c",
        type=int,
        default=0,
        help="Number of child tickets (default: 0)"
    )

    parser.add_argument(
        "--infant",
        "-i",
        type=int,
        default=0,
        help="Number of infant tickets (default: 0)"
    )

    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: LOG_LEVEL from the environment, or INFO)"
    )

    args = parser.parse_args(argv)

    try:
        configure_logging(args.log_level)

        requests = build_requests(args.adult, args.child, args.infant)
        service = TicketService(TicketPaymentServiceImpl(), SeatReservationServiceImpl())

        service.purchase_tickets(args.account_id, *requests)
        totals = service.calculate_totals(*requests)

        print()
        print("=" * 60)
        print("PURCHASE SUMMARY")
        print("=" * 60)
        print(f"Account ID:      {args.account_id}")
        print(f"  Adult tickets:  {totals.adult_tickets}")
        print(f"  Child tickets:  {totals.child_tickets}")
        print(f"  Infant tickets: {totals.infant_tickets}")
        print(f"Total tickets:   {totals.total_tickets}")
        print(f"Seats reserved:  {totals.total_seats_to_allocate}")
        print(f"Amount paid:     {totals.total_amount_to_pay} pence")
        print("=" * 60)

        return 0

    except (InvalidPurchaseError, ValueError) as e:
        print(f"\nPurchase rejected: {e}", file=sys.stderr)
        return 1

    except RuntimeError as e:
        print(f"\nConfiguration error: {e}", file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        print("\n\nPurchase interrupted by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
