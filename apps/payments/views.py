from drf_spectacular.utils import extend_schema
from rest_framework import viewsets, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.pagination import PageNumberPagination
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from apps.conferences.services import get_conference

from .exceptions import PaymentsServiceError
from .helpers import months, years
from .models import Payment
from .serializers import (
    PaymentSerializer,
    PaymentOptionsSerializer,
    PaymentCompletionSerializer,
    PaymentInputSerializer,
)
from .services import complete_payment


class PaymentPagination(PageNumberPagination):
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class PaymentViewSet(viewsets.ReadOnlyModelViewSet):
    """
    ViewSet for the current user's payments (read-only).

    list: Get all payments of the current user
    retrieve: Get a specific payment
    """

    serializer_class = PaymentSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = PaymentPagination

    def get_queryset(self):
        return (
            Payment.objects
            .filter(user=self.request.user)
            .select_related('conference')
            .prefetch_related('ticket_purchases')
        )


@extend_schema(
    responses={200: PaymentOptionsSerializer},
    description="Get month and year options for the card expiry fields.",
    tags=['payments'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def payment_options(request):
    """Get select-list options for the payment form."""
    serializer = PaymentOptionsSerializer({
        'months': [{'label': label, 'value': value} for label, value in months()],
        'years': years(),
    })
    return Response(serializer.data)


@extend_schema(
    request=PaymentInputSerializer,
    responses={201: PaymentCompletionSerializer},
    description="Pay all unpaid tickets of the current user in a conference.",
    tags=['payments'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def pay_conference(request, conference_id):
    """
    Complete a payment for the user's unpaid tickets.

    POST /api/payments/conferences/{conference_id}/pay/
    Body: {"card_expiry_month": 4, "card_expiry_year": 2030}
    """
    conference = get_conference(conference_id)

    input_serializer = PaymentInputSerializer(data=request.data)
    input_serializer.is_valid(raise_exception=True)

    try:
        completion = complete_payment(conference=conference, user=request.user)
    except PaymentsServiceError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    serializer = PaymentCompletionSerializer(completion)
    return Response(serializer.data, status=status.HTTP_201_CREATED)
