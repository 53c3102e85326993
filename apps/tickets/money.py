"""
Money helpers for ticket prices.

Prices are stored as integer minor units next to an ISO currency code
(cents for USD, yen for JPY, fils for KWD) and exposed as ``moneyed.Money``
values. Ticket totals are never converted between currencies: adding two
amounts in different currencies raises ``UnknownExchangeRateError``.
"""

from decimal import Decimal

from django.conf import settings
from moneyed import Money, get_currency
from moneyed.classes import CurrencyDoesNotExist

from .exceptions import UnknownExchangeRateError

# Minor-unit amount signalling a failed cross-ticket aggregation
AGGREGATION_FAILED_MINOR_UNITS = -1


def reference_currency():
    return getattr(settings, 'TICKETS_REFERENCE_CURRENCY', 'USD')


def is_known_currency(code):
    if not code:
        return False
    try:
        get_currency(code)
    except CurrencyDoesNotExist:
        return False
    return True


def minor_units_per_unit(currency):
    """Number of minor units in one major unit, e.g. 100 for USD, 1 for JPY."""
    return get_currency(getattr(currency, 'code', currency)).sub_unit


def decimal_places(currency):
    step = Decimal(1) / minor_units_per_unit(currency)
    return max(0, -step.normalize().as_tuple().exponent)


def from_minor_units(amount, currency):
    """Build a Money value from an integer amount of minor units."""
    return Money(Decimal(amount) / minor_units_per_unit(currency), currency)


def to_minor_units(money):
    return int(money.amount * money.currency.sub_unit)


def format_amount(money):
    """Amount as a string with the currency's own number of decimals."""
    return f"{money.amount:.{decimal_places(money.currency)}f}"


def zero_money(currency=None):
    return from_minor_units(0, currency or reference_currency())


def aggregation_failed_money():
    return from_minor_units(AGGREGATION_FAILED_MINOR_UNITS, reference_currency())


def is_aggregation_failure(money):
    return (
        money.currency.code == reference_currency()
        and to_minor_units(money) == AGGREGATION_FAILED_MINOR_UNITS
    )


def add_money(left, right):
    """
    Add two Money values.

    Raises:
        UnknownExchangeRateError: If the currencies differ. No exchange
            rates are configured, so mixed totals cannot be computed.
    """
    if left.currency != right.currency:
        raise UnknownExchangeRateError(
            f"No exchange rate from {right.currency.code} to {left.currency.code}"
        )
    return left + right
