from drf_spectacular.utils import extend_schema
from rest_framework import viewsets, status
from rest_framework.decorators import action, api_view, permission_classes
from rest_framework.pagination import PageNumberPagination
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from apps.conferences.services import get_conference
from apps.conferences.permissions import IsConferenceOrganizer

from .models import Ticket
from .money import is_aggregation_failure
from .permissions import CanViewTicketSales
from .serializers import (
    TicketSerializer,
    TicketSalesSerializer,
    TicketPurchaseSerializer,
    PurchaseResultSerializer,
    MyPurchasesSerializer,
    # Input serializers
    TicketFilterSerializer,
    PurchaseInputSerializer,
)
from .services import (
    InvalidQuantityError,
    purchase_tickets,
    total_price_across_tickets,
)


class TicketPagination(PageNumberPagination):
    page_size = 50
    page_size_query_param = 'page_size'
    max_page_size = 200


class TicketViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Ticket CRUD operations.

    list: Get tickets (filterable by conference)
    create: Add a ticket to a conference (organizer only)
    retrieve: Get a specific ticket
    update/partial_update/destroy: Organizer only
    sales: Tickets sold and turnover (organizer only)
    """

    queryset = Ticket.objects.select_related('conference')
    serializer_class = TicketSerializer
    permission_classes = [IsAuthenticated, IsConferenceOrganizer]
    pagination_class = TicketPagination

    def get_permissions(self):
        if self.action == 'sales':
            return [IsAuthenticated(), CanViewTicketSales()]
        return super().get_permissions()

    def get_queryset(self):
        queryset = super().get_queryset()

        filter_serializer = TicketFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        conference_id = params.get('conference')
        if conference_id:
            queryset = queryset.filter(conference_id=conference_id)

        return queryset

    @extend_schema(responses={200: TicketSalesSerializer})
    @action(detail=True, methods=['get'])
    def sales(self, request, pk=None):
        """
        Get tickets sold and turnover.

        GET /api/tickets/{id}/sales/
        """
        ticket = self.get_object()
        return Response(TicketSalesSerializer(ticket).data)


@extend_schema(
    request=PurchaseInputSerializer,
    responses={200: PurchaseResultSerializer, 400: PurchaseResultSerializer},
    description="Set the requested quantity of each ticket of a conference for the current user.",
    tags=['tickets'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def purchase(request, conference_id):
    """
    Purchase tickets of a conference.

    POST /api/tickets/conferences/{conference_id}/purchase/
    Body: {"quantities": {"<ticket id>": 2}}
    """
    conference = get_conference(conference_id)

    input_serializer = PurchaseInputSerializer(data=request.data)
    input_serializer.is_valid(raise_exception=True)

    try:
        outcome = purchase_tickets(
            conference=conference,
            user=request.user,
            requested_quantities=input_serializer.validated_data['quantities'],
        )
    except InvalidQuantityError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    data = {
        'purchases': TicketPurchaseSerializer(outcome.purchases, many=True).data,
        'error': outcome.error_message,
    }
    response_status = status.HTTP_200_OK if outcome.succeeded else status.HTTP_400_BAD_REQUEST
    return Response(data, status=response_status)


@extend_schema(
    responses={200: MyPurchasesSerializer},
    description="Get the current user's ticket quantities and totals for a conference.",
    tags=['tickets'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def my_purchases(request, conference_id):
    """
    Summarize the current user's purchases in a conference.

    GET /api/tickets/conferences/{conference_id}/my_purchases/
    """
    conference = get_conference(conference_id)
    user = request.user

    tickets = []
    for ticket in conference.tickets.all():
        if not ticket.bought_by(user):
            continue
        tickets.append({
            'ticket': ticket.id,
            'title': ticket.title,
            'price': ticket.price,
            'quantity_paid': ticket.quantity_purchased_by(user, paid=True),
            'quantity_unpaid': ticket.quantity_purchased_by(user, paid=False),
            'total_paid': ticket.total_price(user, paid=True),
            'total_unpaid': ticket.total_price(user, paid=False),
        })

    total_paid = total_price_across_tickets(conference=conference, user=user, paid=True)
    total_unpaid = total_price_across_tickets(conference=conference, user=user, paid=False)

    serializer = MyPurchasesSerializer({
        'tickets': tickets,
        'total_paid': total_paid,
        'total_unpaid': total_unpaid,
        'aggregation_failed': is_aggregation_failure(total_paid) or is_aggregation_failure(total_unpaid),
    })
    return Response(serializer.data)
