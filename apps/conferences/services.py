"""
Conference lookups shared by the ticket and payment endpoints.
"""

from .exceptions import ConferenceNotFoundError
from .models import Conference


def get_conference(conference_id) -> Conference:
    """
    Fetch a conference by ID.

    Raises:
        ConferenceNotFoundError: If the conference doesn't exist
    """
    try:
        return Conference.objects.get(pk=conference_id)
    except Conference.DoesNotExist:
        raise ConferenceNotFoundError()
