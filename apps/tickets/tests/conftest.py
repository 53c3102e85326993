import pytest
from datetime import date
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.conferences.models import Conference
from apps.tickets.models import Ticket, TicketPurchase


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def organizer(db):
    """Create and return the conference organizer."""
    return User.objects.create_user(
        email='organizer@example.com',
        password='TestPass123!',
        display_name='Conference Organizer',
    )


@pytest.fixture
def buyer(db):
    """Create and return a ticket buyer."""
    return User.objects.create_user(
        email='buyer@example.com',
        password='TestPass123!',
        display_name='Ticket Buyer',
    )


@pytest.fixture
def other_buyer(db):
    """Create and return a second ticket buyer."""
    return User.objects.create_user(
        email='other@example.com',
        password='TestPass123!',
        display_name='Other Buyer',
    )


def authenticate(client, user):
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def organizer_client(api_client, organizer):
    """Return API client authenticated as organizer."""
    return authenticate(api_client, organizer)


@pytest.fixture
def buyer_client(api_client, buyer):
    """Return API client authenticated as buyer."""
    return authenticate(api_client, buyer)


@pytest.fixture
def conference(db, organizer):
    """Create a conference owned by organizer."""
    return Conference.objects.create(
        name='PyCon Test',
        description='A conference for testing',
        starts_on=date(2030, 5, 1),
        ends_on=date(2030, 5, 3),
        organizer=organizer,
    )


@pytest.fixture
def other_conference(db, organizer):
    """Create a second conference selling in euros."""
    return Conference.objects.create(
        name='EuroConf Test',
        organizer=organizer,
    )


@pytest.fixture
def ticket_a(db, conference):
    """Conference ticket priced 250.00 USD."""
    return Ticket.objects.create(
        conference=conference,
        title='Regular',
        description='Full conference access',
        price_cents=25000,
        price_currency='USD',
    )


@pytest.fixture
def ticket_b(db, conference, ticket_a):
    """Conference ticket priced 40.00 USD, created after ticket_a."""
    return Ticket.objects.create(
        conference=conference,
        title='Workshop',
        price_cents=4000,
        price_currency='USD',
    )


@pytest.fixture
def euro_ticket(db, other_conference):
    """Ticket of other_conference priced 99.00 EUR."""
    return Ticket.objects.create(
        conference=other_conference,
        title='Early Bird',
        price_cents=9900,
        price_currency='EUR',
    )


@pytest.fixture
def unpaid_purchase(db, ticket_a, buyer, conference):
    """Unpaid purchase of two ticket_a for buyer."""
    return TicketPurchase.objects.create(
        ticket=ticket_a,
        user=buyer,
        conference=conference,
        quantity=2,
    )


@pytest.fixture
def paid_purchase(db, ticket_a, buyer, conference):
    """Paid purchase of one ticket_a for buyer."""
    return TicketPurchase.objects.create(
        ticket=ticket_a,
        user=buyer,
        conference=conference,
        quantity=1,
        paid=True,
    )
