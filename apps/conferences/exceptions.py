"""
Domain exceptions for conferences app.
"""
from rest_framework.exceptions import APIException


class ConferenceNotFoundError(APIException):
    """Conference not found."""
    status_code = 404
    default_detail = 'Conference not found.'
    default_code = 'conference_not_found'
