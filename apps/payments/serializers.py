from django.utils import timezone
from rest_framework import serializers

from apps.tickets.serializers import MoneyField
from .helpers import months, years
from .models import Payment


# =============================================================================
# Input Serializers
# =============================================================================

class PaymentInputSerializer(serializers.Serializer):
    """
    Validate the payment form.

    Fields:
        card_expiry_month (int): One of the months() values
        card_expiry_year (int): One of the years() values
    """

    card_expiry_month = serializers.ChoiceField(choices=[])
    card_expiry_year = serializers.ChoiceField(choices=[])

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # Years move with the current date
        self.fields['card_expiry_month'].choices = [(value, label) for label, value in months()]
        self.fields['card_expiry_year'].choices = years()

    def validate(self, attrs):
        today = timezone.localdate()
        expiry = (attrs['card_expiry_year'], attrs['card_expiry_month'])

        if expiry < (today.year, today.month):
            raise serializers.ValidationError({
                'card_expiry_month': 'Card has expired.'
            })

        return attrs


# =============================================================================
# Output Serializers
# =============================================================================

class MonthOptionSerializer(serializers.Serializer):
    label = serializers.CharField()
    value = serializers.IntegerField()


class PaymentOptionsSerializer(serializers.Serializer):
    months = MonthOptionSerializer(many=True)
    years = serializers.ListField(child=serializers.IntegerField())


class PaymentSerializer(serializers.ModelSerializer):
    amount = MoneyField()
    ticket_purchases = serializers.PrimaryKeyRelatedField(many=True, read_only=True)

    class Meta:
        model = Payment
        fields = [
            'id',
            'reference',
            'conference',
            'user',
            'amount',
            'status',
            'ticket_purchases',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class PaidMarkResultSerializer(serializers.Serializer):
    purchase = serializers.UUIDField(source='purchase.id')
    title = serializers.CharField(source='purchase.title')
    quantity = serializers.IntegerField(source='purchase.quantity')
    saved = serializers.BooleanField()
    messages = serializers.ListField(child=serializers.CharField(), source='errors')


class PaymentCompletionSerializer(serializers.Serializer):
    payment = PaymentSerializer()
    results = PaidMarkResultSerializer(many=True)
