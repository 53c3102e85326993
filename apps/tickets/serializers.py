import copy

from django.core.exceptions import ValidationError as DjangoValidationError
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema_field
from rest_framework import serializers

from .models import Ticket, TicketPurchase
from .money import format_amount, to_minor_units


@extend_schema_field(OpenApiTypes.OBJECT)
class MoneyField(serializers.Field):
    """Read-only representation of a Money value."""

    def __init__(self, **kwargs):
        kwargs['read_only'] = True
        super().__init__(**kwargs)

    def to_representation(self, value):
        return {
            'amount': format_amount(value),
            'currency': value.currency.code,
            'cents': to_minor_units(value),
        }


# =============================================================================
# Input Serializers
# =============================================================================

class TicketFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for ticket listing.

    Query Parameters:
        conference (UUID): Filter by conference ID
    """

    conference = serializers.UUIDField(required=False)


class PurchaseInputSerializer(serializers.Serializer):
    """
    Validate a purchase request.

    Fields:
        quantities (dict): Ticket ID to requested quantity (>= 0)
    """

    quantities = serializers.DictField(
        child=serializers.IntegerField(min_value=0),
        allow_empty=True,
    )


# =============================================================================
# Output Serializers
# =============================================================================

class TicketSerializer(serializers.ModelSerializer):
    """Ticket details; create/update run the model validation."""

    price = MoneyField()

    class Meta:
        model = Ticket
        fields = [
            'id',
            'conference',
            'title',
            'description',
            'price_cents',
            'price_currency',
            'price',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate_price_currency(self, value):
        return value.upper()

    def validate_conference(self, value):
        if self.instance is not None and value != self.instance.conference:
            raise serializers.ValidationError('Tickets cannot be moved to another conference.')

        request = self.context.get('request')
        if request and not value.is_organizer(request.user):
            raise serializers.ValidationError('Only the conference organizer can add tickets.')
        return value

    def validate(self, attrs):
        ticket = copy.copy(self.instance) if self.instance is not None else Ticket()
        for name, value in attrs.items():
            setattr(ticket, name, value)

        try:
            ticket.full_clean()
        except DjangoValidationError as e:
            raise serializers.ValidationError(e.message_dict)

        return attrs


class TicketSalesSerializer(serializers.Serializer):
    ticket = serializers.UUIDField(source='id')
    title = serializers.CharField()
    tickets_sold = serializers.IntegerField()
    tickets_turnover = MoneyField()


class TicketPurchaseSerializer(serializers.ModelSerializer):
    title = serializers.CharField(read_only=True)
    price = MoneyField()

    class Meta:
        model = TicketPurchase
        fields = [
            'id',
            'ticket',
            'conference',
            'title',
            'price',
            'quantity',
            'paid',
            'payment',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class PurchaseResultSerializer(serializers.Serializer):
    purchases = TicketPurchaseSerializer(many=True)
    error = serializers.CharField(allow_blank=True)


class UserTicketSummarySerializer(serializers.Serializer):
    ticket = serializers.UUIDField()
    title = serializers.CharField()
    price = MoneyField()
    quantity_paid = serializers.IntegerField()
    quantity_unpaid = serializers.IntegerField()
    total_paid = MoneyField()
    total_unpaid = MoneyField()


class MyPurchasesSerializer(serializers.Serializer):
    """Per-ticket quantities and conference totals for the current user."""

    tickets = UserTicketSummarySerializer(many=True)
    total_paid = MoneyField()
    total_unpaid = MoneyField()
    aggregation_failed = serializers.BooleanField()
