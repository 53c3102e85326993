import pytest
from decimal import Decimal
from django.core.exceptions import ValidationError
from django.db import IntegrityError
from moneyed import Money
from apps.tickets.models import Ticket, TicketPurchase


# =============================================================================
# Ticket Validation Tests
# =============================================================================

@pytest.mark.django_db
class TestTicketValidation:
    """Tests for validation run on Ticket.save()."""

    def test_valid_ticket_saves(self, conference):
        """Ticket with title, positive price and currency is saved."""
        ticket = Ticket.objects.create(
            conference=conference,
            title='Student',
            price_cents=5000,
            price_currency='USD',
        )

        assert Ticket.objects.filter(pk=ticket.pk).exists()

    @pytest.mark.parametrize('price_cents', [0, -100])
    def test_non_positive_price_rejected(self, conference, price_cents):
        """Price must be greater than zero."""
        with pytest.raises(ValidationError) as exc_info:
            Ticket.objects.create(
                conference=conference,
                title='Free',
                price_cents=price_cents,
                price_currency='USD',
            )

        assert 'price_cents' in exc_info.value.message_dict
        assert not Ticket.objects.filter(title='Free').exists()

    def test_missing_price_rejected(self, conference):
        with pytest.raises(ValidationError) as exc_info:
            Ticket.objects.create(conference=conference, title='No price', price_currency='USD')

        assert 'price_cents' in exc_info.value.message_dict

    def test_missing_title_rejected(self, conference):
        with pytest.raises(ValidationError) as exc_info:
            Ticket.objects.create(conference=conference, title='', price_cents=100, price_currency='USD')

        assert 'title' in exc_info.value.message_dict

    def test_missing_currency_rejected(self, conference):
        with pytest.raises(ValidationError) as exc_info:
            Ticket.objects.create(conference=conference, title='Blank', price_cents=100, price_currency='')

        assert 'price_currency' in exc_info.value.message_dict

    def test_unknown_currency_rejected(self, conference):
        with pytest.raises(ValidationError) as exc_info:
            Ticket.objects.create(conference=conference, title='Odd', price_cents=100, price_currency='XYZ')

        assert 'price_currency' in exc_info.value.message_dict

    def test_currency_must_match_sibling_tickets(self, conference, ticket_a):
        """All tickets of a conference share one currency."""
        with pytest.raises(ValidationError) as exc_info:
            Ticket.objects.create(
                conference=conference,
                title='Euro ticket',
                price_cents=1000,
                price_currency='EUR',
            )

        assert exc_info.value.message_dict['price_currency'] == [
            'is different from the existing tickets of this conference.'
        ]

    def test_other_conference_may_use_other_currency(self, ticket_a, euro_ticket):
        """Currency check is scoped to one conference."""
        assert ticket_a.price_currency == 'USD'
        assert euro_ticket.price_currency == 'EUR'

    def test_sole_ticket_can_change_currency(self, euro_ticket):
        """The ticket being edited is not compared with itself."""
        euro_ticket.price_currency = 'GBP'
        euro_ticket.save()

        euro_ticket.refresh_from_db()
        assert euro_ticket.price_currency == 'GBP'

    def test_price_is_money_from_cents(self, ticket_a):
        assert ticket_a.price == Money(Decimal('250.00'), 'USD')

    def test_price_uses_currency_minor_units(self, other_conference):
        """Yen have no minor unit and dinars have a thousand fils."""
        yen = Ticket.objects.create(conference=other_conference, title='Tokyo', price_cents=500, price_currency='JPY')

        assert yen.price == Money(500, 'JPY')

        yen.price_currency = 'KWD'
        yen.price_cents = 1250
        yen.save()
        assert yen.price == Money(Decimal('1.250'), 'KWD')

    def test_deleting_ticket_deletes_purchases(self, ticket_a, unpaid_purchase):
        ticket_a.delete()

        assert not TicketPurchase.objects.filter(pk=unpaid_purchase.pk).exists()

    def test_deleting_conference_deletes_tickets_and_purchases(self, conference, ticket_a, unpaid_purchase):
        conference.delete()

        assert not Ticket.objects.filter(pk=ticket_a.pk).exists()
        assert not TicketPurchase.objects.filter(pk=unpaid_purchase.pk).exists()


# =============================================================================
# Ticket Purchase Queries
# =============================================================================

@pytest.mark.django_db
class TestTicketBuyerQueries:
    """Tests for bought_by / paid_by / unpaid_by."""

    def test_no_purchases(self, ticket_a, buyer):
        assert ticket_a.bought_by(buyer) is False
        assert ticket_a.paid_by(buyer) is False
        assert ticket_a.unpaid_by(buyer) is False

    def test_unpaid_purchase(self, ticket_a, buyer, unpaid_purchase):
        assert ticket_a.bought_by(buyer) is True
        assert ticket_a.paid_by(buyer) is False
        assert ticket_a.unpaid_by(buyer) is True

    def test_paid_purchase(self, ticket_a, buyer, paid_purchase):
        assert ticket_a.bought_by(buyer) is True
        assert ticket_a.paid_by(buyer) is True
        assert ticket_a.unpaid_by(buyer) is False

    def test_buyers_are_distinct(self, ticket_a, buyer, unpaid_purchase, paid_purchase):
        assert list(ticket_a.buyers) == [buyer]

    def test_other_users_purchases_ignored(self, ticket_a, other_buyer, unpaid_purchase):
        assert ticket_a.bought_by(other_buyer) is False


@pytest.mark.django_db
class TestTicketQuantities:
    """Tests for quantity, price and turnover aggregates."""

    def test_quantity_zero_without_purchases(self, ticket_a, buyer):
        assert ticket_a.quantity_purchased_by(buyer, paid=False) == 0
        assert ticket_a.quantity_purchased_by(buyer, paid=True) == 0

    def test_quantity_sums_matching_records(self, ticket_a, buyer, conference, unpaid_purchase):
        TicketPurchase.objects.create(ticket=ticket_a, user=buyer, conference=conference, quantity=3, paid=True)
        TicketPurchase.objects.create(ticket=ticket_a, user=buyer, conference=conference, quantity=4, paid=True)

        assert ticket_a.quantity_purchased_by(buyer, paid=True) == 7
        assert ticket_a.quantity_purchased_by(buyer, paid=False) == 2

    def test_total_price(self, ticket_a, buyer, unpaid_purchase):
        assert ticket_a.total_price(buyer, paid=False) == Money(Decimal('500.00'), 'USD')
        assert ticket_a.total_price(buyer, paid=True) == Money(0, 'USD')

    def test_tickets_sold_counts_paid_and_unpaid(self, ticket_a, other_buyer, conference, unpaid_purchase, paid_purchase):
        TicketPurchase.objects.create(ticket=ticket_a, user=other_buyer, conference=conference, quantity=5)

        assert ticket_a.tickets_sold == 8

    def test_tickets_sold_zero(self, ticket_a):
        assert ticket_a.tickets_sold == 0
        assert ticket_a.tickets_turnover == Money(0, 'USD')

    def test_tickets_turnover(self, ticket_a, unpaid_purchase, paid_purchase):
        assert ticket_a.tickets_turnover == Money(Decimal('750.00'), 'USD')


# =============================================================================
# TicketPurchase Validation Tests
# =============================================================================

@pytest.mark.django_db
class TestTicketPurchaseValidation:

    @pytest.mark.parametrize('quantity', [0, -1])
    def test_non_positive_quantity_rejected(self, ticket_a, buyer, conference, quantity):
        with pytest.raises(ValidationError) as exc_info:
            TicketPurchase.objects.create(ticket=ticket_a, user=buyer, conference=conference, quantity=quantity)

        assert 'quantity' in exc_info.value.message_dict

    def test_ticket_must_belong_to_conference(self, euro_ticket, buyer, conference):
        with pytest.raises(ValidationError) as exc_info:
            TicketPurchase.objects.create(ticket=euro_ticket, user=buyer, conference=conference, quantity=1)

        assert 'ticket' in exc_info.value.message_dict

    def test_second_unpaid_purchase_rejected(self, ticket_a, buyer, conference, unpaid_purchase):
        with pytest.raises(ValidationError):
            TicketPurchase.objects.create(ticket=ticket_a, user=buyer, conference=conference, quantity=1)

    def test_database_rejects_duplicate_unpaid_rows(self, ticket_a, buyer, conference, unpaid_purchase):
        """Unique constraint holds even when model validation is bypassed."""
        with pytest.raises(IntegrityError):
            TicketPurchase.objects.bulk_create([
                TicketPurchase(ticket=ticket_a, user=buyer, conference=conference, quantity=1),
            ])

    def test_several_paid_purchases_allowed(self, ticket_a, buyer, conference, paid_purchase):
        TicketPurchase.objects.create(ticket=ticket_a, user=buyer, conference=conference, quantity=1, paid=True)

        assert ticket_a.purchases.filter(user=buyer, paid=True).count() == 2

    def test_delegates_ticket_attributes(self, unpaid_purchase, ticket_a):
        assert unpaid_purchase.title == 'Regular'
        assert unpaid_purchase.description == 'Full conference access'
        assert unpaid_purchase.price == ticket_a.price
        assert unpaid_purchase.price_cents == 25000
        assert unpaid_purchase.price_currency == 'USD'
