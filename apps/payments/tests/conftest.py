import pytest
from datetime import date
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.conferences.models import Conference
from apps.payments.models import Payment, PaymentStatus
from apps.tickets.models import Ticket, TicketPurchase


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def organizer(db):
    return User.objects.create_user(
        email='organizer@example.com',
        password='TestPass123!',
        display_name='Conference Organizer',
    )


@pytest.fixture
def payer(db):
    """Create and return the paying user."""
    return User.objects.create_user(
        email='payer@example.com',
        password='TestPass123!',
        display_name='Payer',
    )


@pytest.fixture
def other_user(db):
    return User.objects.create_user(
        email='other@example.com',
        password='TestPass123!',
        display_name='Other User',
    )


@pytest.fixture
def payer_client(api_client, payer):
    """Return API client authenticated as payer."""
    refresh = RefreshToken.for_user(payer)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def conference(db, organizer):
    return Conference.objects.create(
        name='PyCon Test',
        starts_on=date(2030, 5, 1),
        ends_on=date(2030, 5, 3),
        organizer=organizer,
    )


@pytest.fixture
def regular_ticket(db, conference):
    """Ticket priced 250.00 USD."""
    return Ticket.objects.create(
        conference=conference,
        title='Regular',
        price_cents=25000,
        price_currency='USD',
    )


@pytest.fixture
def workshop_ticket(db, conference, regular_ticket):
    """Ticket priced 40.00 USD."""
    return Ticket.objects.create(
        conference=conference,
        title='Workshop',
        price_cents=4000,
        price_currency='USD',
    )


@pytest.fixture
def unpaid_purchases(db, conference, payer, regular_ticket, workshop_ticket):
    """Two regular and three workshop tickets, unpaid (620.00 USD)."""
    return [
        TicketPurchase.objects.create(ticket=regular_ticket, user=payer, conference=conference, quantity=2),
        TicketPurchase.objects.create(ticket=workshop_ticket, user=payer, conference=conference, quantity=3),
    ]


@pytest.fixture
def completed_payment(db, payer, conference):
    return Payment.objects.create(
        user=payer,
        conference=conference,
        amount_cents=12345,
        currency='USD',
        status=PaymentStatus.COMPLETED,
    )
