# ==========================================
# apps/payments/models.py
# ==========================================

from django.db import models
import secrets
import uuid

from apps.tickets.money import from_minor_units


class PaymentStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    COMPLETED = 'completed', 'Completed'
    FAILED = 'failed', 'Failed'


class Payment(models.Model):
    """Payment settling a user's unpaid tickets of one conference."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='payments'
    )
    conference = models.ForeignKey(
        'conferences.Conference',
        on_delete=models.CASCADE,
        related_name='payments'
    )

    # Amount in the currency's minor units
    amount_cents = models.IntegerField()
    currency = models.CharField(max_length=3)

    status = models.CharField(
        max_length=20,
        choices=PaymentStatus.choices,
        default=PaymentStatus.PENDING
    )

    # Unique reference shown to the buyer and attached to purchases
    reference = models.CharField(
        max_length=64,
        unique=True,
        editable=False
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'payments'
        indexes = [
            models.Index(fields=['user', 'conference'], name='payments_user_conf_idx'),
            models.Index(fields=['status', 'created_at'], name='payments_status_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.reference} - {self.amount} ({self.status})"

    def save(self, *args, **kwargs):
        if not self.reference:
            self.reference = self._generate_reference()
        super().save(*args, **kwargs)

    def _generate_reference(self):
        # Format: TIX-<short-uuid>-<4-digit-random>
        short_id = self.id.hex[:8].upper()
        return f"TIX-{short_id}-{secrets.randbelow(10000):04d}"

    @property
    def amount(self):
        return from_minor_units(self.amount_cents, self.currency)
