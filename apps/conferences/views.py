from rest_framework import viewsets
from rest_framework.permissions import IsAuthenticated
from rest_framework.pagination import PageNumberPagination

from .models import Conference
from .permissions import IsConferenceOrganizer
from .serializers import ConferenceSerializer


class ConferencePagination(PageNumberPagination):
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class ConferenceViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Conference CRUD operations.

    list/retrieve: any authenticated user
    create: any authenticated user (becomes the organizer)
    update/partial_update/destroy: organizer only
    """

    queryset = Conference.objects.select_related('organizer')
    serializer_class = ConferenceSerializer
    permission_classes = [IsAuthenticated, IsConferenceOrganizer]
    pagination_class = ConferencePagination

    def perform_create(self, serializer):
        serializer.save(organizer=self.request.user)
