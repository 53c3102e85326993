"""
Permission classes for tickets app.
"""
from rest_framework.permissions import BasePermission


class CanViewTicketSales(BasePermission):
    """
    Permission to view sales figures of a ticket.

    Only the organizer of the ticket's conference sees how many
    tickets were sold and the resulting turnover.
    """

    message = 'Only the conference organizer can view ticket sales.'

    def has_object_permission(self, request, view, obj):
        return obj.conference.is_organizer(request.user)
