"""
Domain exceptions for tickets app.

Service errors derive from TicketsServiceError and are mapped to
HTTP responses by the views.
"""


class TicketsServiceError(Exception):
    """Base exception for ticket service errors."""
    pass


class InvalidQuantityError(TicketsServiceError):
    """Raised when a requested quantity is not a non-negative integer."""

    def __init__(self, ticket_id, value):
        self.ticket_id = ticket_id
        self.value = value
        super().__init__(
            f"Invalid quantity {value!r} for ticket {ticket_id}: "
            "expected a non-negative integer"
        )


class UnknownExchangeRateError(TicketsServiceError):
    """Raised when amounts in different currencies are added."""
    pass

