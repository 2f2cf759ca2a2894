"""
Domain errors raised by the purchase flow.
"""

from __future__ import annotations


class InvalidPurchaseError(Exception):
    """Raised when a ticket purchase breaks one of the purchase rules."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class ConfigurationError(Exception):
    """Raised when a service is built without a required collaborator."""
    pass


__all__ = [
    "ConfigurationError",
    "InvalidPurchaseError",
]
