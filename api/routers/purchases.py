"""
Purchases API Endpoints.

Endpoint for purchasing tickets for an account.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_ticket_service
from api.models import ErrorResponse, PurchaseRequest, PurchaseResponse
from domain.errors import InvalidPurchaseError
from domain.ticket_type_request import TicketTypeRequest
from services.ticket_service import TicketService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/purchases",
    response_model=PurchaseResponse,
    responses={400: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
    summary="Purchase Tickets",
    description="Validate a ticket purchase, take payment and reserve seats."
)
def purchase_tickets(
    request: PurchaseRequest,
    ticket_service: TicketService = Depends(get_ticket_service),
):
    """
    Purchase tickets for an account.

    **Rules:**
    - Account ID must be greater than zero
    - At least one ticket must be requested, at most 25 in total
    - Child and Infant tickets need at least one Adult ticket
    - No more Infants than Adults (infants sit on an adult's lap)

    **Pricing:** Adult 2500, Child 1500, Infant 0 (pence). Infants get no seat.

    **Example request:**
    ```json
    {
      "account_id": 42,
      "tickets": [
        {"ticket_type": "ADULT", "no_of_tickets": 2},
        {"ticket_type": "CHILD", "no_of_tickets": 4}
      ]
    }
    ```

    **Success response:**
    ```json
    {
      "success": true,
      "account_id": 42,
      "total_tickets": 6,
      "total_amount_to_pay": 11000,
      "total_seats_to_allocate": 6,
      "message": "Purchase completed successfully."
    }
    ```

    **Failure response (400):**
    ```json
    {"detail": "Cannot purchase more than 25 tickets at a time. Requested: 26"}
    ```
    """
    try:
        # Convert API items to domain requests
        try:
            ticket_type_requests = [
                TicketTypeRequest(item.ticket_type, item.no_of_tickets)
                for item in request.tickets
            ]
        except ValueError as e:
            raise HTTPException(status_code=422, detail=str(e))

        try:
            ticket_service.purchase_tickets(request.account_id, *ticket_type_requests)
            totals = ticket_service.calculate_totals(*ticket_type_requests)
        except InvalidPurchaseError as e:
            raise HTTPException(status_code=400, detail=e.reason)

        return PurchaseResponse(
            success=True,
            account_id=request.account_id,
            total_tickets=totals.total_tickets,
            total_amount_to_pay=totals.total_amount_to_pay,
            total_seats_to_allocate=totals.total_seats_to_allocate,
            message="Purchase completed successfully."
        )

    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Unexpected error purchasing tickets for account_id=%s", request.account_id)
        raise HTTPException(
            status_code=500,
            detail=f"Failed to purchase tickets: {str(e)}"
        )
