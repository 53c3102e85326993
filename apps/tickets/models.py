# ==========================================
# apps/tickets/models.py
# ==========================================

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models
from django.db.models import Q, Sum
import uuid

from .money import from_minor_units, is_known_currency


class Ticket(models.Model):
    """Purchasable offering of a conference with a fixed price."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    conference = models.ForeignKey(
        'conferences.Conference',
        on_delete=models.CASCADE,
        related_name='tickets'
    )
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)

    # Price in the currency's minor units (cents for USD)
    price_cents = models.IntegerField(validators=[MinValueValidator(1)])
    price_currency = models.CharField(max_length=3)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'tickets'
        indexes = [
            models.Index(fields=['conference', 'created_at'], name='tickets_conf_created_idx'),
        ]
        ordering = ['created_at']

    def __str__(self):
        return f"{self.title} ({self.price})"

    def save(self, *args, **kwargs):
        self.full_clean()
        super().save(*args, **kwargs)

    def clean(self):
        errors = {}

        if self.price_currency and not is_known_currency(self.price_currency):
            errors['price_currency'] = f"'{self.price_currency}' is not a known currency code."
        elif self.price_currency and self.conference_id:
            # Cross-currency sales within one conference would need conversion
            mismatched = (
                Ticket.objects
                .filter(conference_id=self.conference_id)
                .exclude(pk=self.pk)
                .exclude(price_currency=self.price_currency)
            )
            if mismatched.exists():
                errors['price_currency'] = 'is different from the existing tickets of this conference.'

        if errors:
            raise ValidationError(errors)

    @property
    def price(self):
        return from_minor_units(self.price_cents, self.price_currency)

    @property
    def buyers(self):
        """Distinct users holding any purchase of this ticket."""
        from apps.accounts.models import User
        return User.objects.filter(ticket_purchases__ticket=self).distinct()

    def bought_by(self, user):
        return self.buyers.filter(pk=user.pk).exists()

    def paid_by(self, user):
        return self.purchases.filter(user=user, paid=True).exists()

    def unpaid_by(self, user):
        return self.purchases.filter(user=user, paid=False).exists()

    def quantity_purchased_by(self, user, *, paid):
        """Sum quantities of the user's purchases matching the paid filter."""
        total = self.purchases.filter(user=user, paid=paid).aggregate(
            total=Sum('quantity')
        )['total']
        return total or 0

    def total_price(self, user, *, paid):
        return self.price * self.quantity_purchased_by(user, paid=paid)

    @property
    def tickets_sold(self):
        """Quantity over all purchases, paid and unpaid."""
        return self.purchases.aggregate(total=Sum('quantity'))['total'] or 0

    @property
    def tickets_turnover(self):
        return self.price * self.tickets_sold


class TicketPurchase(models.Model):
    """A user's commitment to buy a quantity of a ticket."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    ticket = models.ForeignKey(
        Ticket,
        on_delete=models.CASCADE,
        related_name='purchases'
    )
    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='ticket_purchases'
    )
    conference = models.ForeignKey(
        'conferences.Conference',
        on_delete=models.CASCADE,
        related_name='ticket_purchases'
    )

    quantity = models.IntegerField(validators=[MinValueValidator(1)])

    # Payment tracking
    paid = models.BooleanField(default=False)
    payment = models.ForeignKey(
        'payments.Payment',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='ticket_purchases'
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'ticket_purchases'
        constraints = [
            models.UniqueConstraint(
                fields=['ticket', 'user', 'conference'],
                condition=Q(paid=False),
                name='unique_unpaid_purchase_per_ticket_user',
            ),
        ]
        indexes = [
            models.Index(fields=['conference', 'user', 'paid'], name='purchases_conf_user_paid_idx'),
            models.Index(fields=['ticket', 'paid'], name='purchases_ticket_paid_idx'),
        ]
        ordering = ['created_at']

    def __str__(self):
        state = 'paid' if self.paid else 'unpaid'
        return f"{self.quantity} x {self.ticket.title} for {self.user} ({state})"

    def save(self, *args, **kwargs):
        self.full_clean()
        super().save(*args, **kwargs)

    def clean(self):
        if self.ticket_id and self.conference_id and self.ticket.conference_id != self.conference_id:
            raise ValidationError({'ticket': 'does not belong to this conference.'})

    # Ticket attributes

    @property
    def title(self):
        return self.ticket.title

    @property
    def description(self):
        return self.ticket.description

    @property
    def price(self):
        return self.ticket.price

    @property
    def price_cents(self):
        return self.ticket.price_cents

    @property
    def price_currency(self):
        return self.ticket.price_currency
