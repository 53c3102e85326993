"""
Permission classes for conference management.
"""
from rest_framework.permissions import BasePermission, SAFE_METHODS


class IsConferenceOrganizer(BasePermission):
    """
    Allow write access to the conference organizer only.

    Works for Conference objects and for any object exposing a
    ``conference`` attribute (tickets, purchases, payments).
    Read-only requests are always allowed at this level.
    """

    message = 'Only the conference organizer can manage this conference.'

    def has_object_permission(self, request, view, obj):
        if request.method in SAFE_METHODS:
            return True
        conference = getattr(obj, 'conference', obj)
        return conference.is_organizer(request.user)
