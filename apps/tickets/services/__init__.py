"""
Tickets app services layer.

Services contain business logic and orchestrate operations across models.
State-changing operations run inside database transactions.
"""

from apps.tickets.exceptions import (
    TicketsServiceError,
    InvalidQuantityError,
    UnknownExchangeRateError,
)

from .pricing import (
    total_price_across_tickets,
)

from .purchasing import (
    PurchaseOutcome,
    PaidMarkResult,
    parse_requested_quantities,
    purchase_tickets,
    mark_purchases_paid,
)


__all__ = [
    # Exceptions
    'TicketsServiceError',
    'InvalidQuantityError',
    'UnknownExchangeRateError',

    # Pricing
    'total_price_across_tickets',

    # Purchasing
    'PurchaseOutcome',
    'PaidMarkResult',
    'parse_requested_quantities',
    'purchase_tickets',
    'mark_purchases_paid',
]
