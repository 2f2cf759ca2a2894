"""
API Request and Response Models.

Pydantic models for validating API requests and serializing responses.
Purchase rules are not repeated here; the ticket service enforces them.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, StrictInt

from domain.ticket_type_request import TicketType


# ============================================================================
# Purchase Models
# ============================================================================

class TicketRequestItem(BaseModel):
    """Tickets of one type within a purchase."""
    ticket_type: TicketType = Field(
        ...,
        description="Ticket type: ADULT, CHILD or INFANT"
    )
    no_of_tickets: StrictInt = Field(
        ...,
        description="Number of tickets of this type"
    )


class PurchaseRequest(BaseModel):
    """Request to purchase tickets for an account."""
    account_id: StrictInt = Field(
        ...,
        description="Account making the purchase"
    )
    tickets: List[TicketRequestItem] = Field(
        default_factory=list,
        description="Ticket requests, one or more"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "account_id": 42,
                "tickets": [
                    {"ticket_type": "ADULT", "no_of_tickets": 2},
                    {"ticket_type": "CHILD", "no_of_tickets": 1},
                    {"ticket_type": "INFANT", "no_of_tickets": 1}
                ]
            }
        }


class PurchaseResponse(BaseModel):
    """Response after a successful purchase."""
    success: bool
    account_id: int
    total_tickets: int
    total_amount_to_pay: int
    total_seats_to_allocate: int
    message: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "success": True,
                "account_id": 42,
                "total_tickets": 4,
                "total_amount_to_pay": 6500,
                "total_seats_to_allocate": 3,
                "message": "Purchase completed successfully."
            }
        }


# ============================================================================
# Error Models
# ============================================================================

class ErrorResponse(BaseModel):
    """Standard error response."""
    detail: str

    class Config:
        json_schema_extra = {
            "example": {
                "detail": "Cannot purchase more than 25 tickets at a time. Requested: 26"
            }
        }
