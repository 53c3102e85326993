from rest_framework import serializers
from .models import Conference


class ConferenceSerializer(serializers.ModelSerializer):
    """Conference details; organizer is always the requesting user."""

    organizer = serializers.PrimaryKeyRelatedField(read_only=True)
    ticket_count = serializers.SerializerMethodField()

    class Meta:
        model = Conference
        fields = [
            'id',
            'name',
            'description',
            'starts_on',
            'ends_on',
            'organizer',
            'ticket_count',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'organizer', 'created_at', 'updated_at']

    def get_ticket_count(self, obj):
        return obj.tickets.count()

    def validate(self, attrs):
        starts_on = attrs.get('starts_on', getattr(self.instance, 'starts_on', None))
        ends_on = attrs.get('ends_on', getattr(self.instance, 'ends_on', None))

        if starts_on and ends_on and ends_on < starts_on:
            raise serializers.ValidationError({
                'ends_on': 'End date must be on or after start date.'
            })

        return attrs
