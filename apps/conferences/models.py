# ==========================================
# apps/conferences/models.py
# ==========================================

from django.core.exceptions import ValidationError
from django.db import models
import uuid


class Conference(models.Model):
    """Event under which tickets are sold."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    starts_on = models.DateField(null=True, blank=True)
    ends_on = models.DateField(null=True, blank=True)
    organizer = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='organized_conferences'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'conferences'
        indexes = [
            models.Index(fields=['organizer', 'created_at'], name='conferences_org_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return self.name

    def clean(self):
        if self.starts_on and self.ends_on and self.ends_on < self.starts_on:
            raise ValidationError({'ends_on': 'End date must be on or after start date.'})

    def is_organizer(self, user):
        return user is not None and self.organizer_id == getattr(user, 'pk', None)
