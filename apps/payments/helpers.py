"""
Option lists for payment forms (card expiry month and year).
"""

from django.utils import timezone, translation
from django.utils.dates import MONTHS

YEARS_AHEAD = 15


def months():
    """Return ("<n> - <Month>", n) pairs for January through December."""
    # Labels stay English whatever language the request activates
    with translation.override('en'):
        return [(f"{number} - {MONTHS[number]}", number) for number in range(1, 13)]


def years():
    """Return the current year and the following fifteen years."""
    current_year = timezone.localdate().year
    return list(range(current_year, current_year + YEARS_AHEAD + 1))
