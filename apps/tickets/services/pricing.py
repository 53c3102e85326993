"""
Pricing service.

Aggregates ticket totals across a conference.
"""

import logging

from apps.conferences.models import Conference
from apps.accounts.models import User
from apps.tickets.exceptions import UnknownExchangeRateError
from apps.tickets.money import add_money, aggregation_failed_money, zero_money

logger = logging.getLogger(__name__)


def total_price_across_tickets(*, conference: Conference, user: User, paid: bool):
    """
    Sum the user's ticket totals over every ticket of a conference.

    Zero-valued ticket totals are skipped. Totals in a currency other than
    the running sum's cannot be converted, and the result then becomes the
    aggregation-failure sentinel (-1 minor unit in the reference currency).

    Args:
        conference: Conference whose tickets are summed
        user: Buyer whose purchases are counted
        paid: Count paid (True) or unpaid (False) purchases

    Returns:
        Money total, zero in the reference currency when nothing contributes
    """
    result = None

    try:
        for ticket in conference.tickets.all():
            price = ticket.total_price(user, paid=paid)
            if not price:
                continue
            result = price if result is None else add_money(result, price)
    except UnknownExchangeRateError as e:
        logger.warning(
            "Cannot total tickets of conference %s for user %s: %s",
            conference.pk, user.pk, e
        )
        return aggregation_failed_money()

    return result if result is not None else zero_money()
