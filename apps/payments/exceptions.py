"""
Domain exceptions for payments app.
"""


class PaymentsServiceError(Exception):
    """Base exception for payment service errors."""
    pass


class NothingToPayError(PaymentsServiceError):
    """Raised when the user holds no unpaid tickets in the conference."""
    pass


class PaymentAmountUnavailableError(PaymentsServiceError):
    """Raised when the unpaid total cannot be computed."""
    pass
