import pytest
from datetime import date
from rest_framework.test import APIClient
from apps.accounts.models import User
from apps.conferences.models import Conference


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
def attendee(db):
    return User.objects.create_user(
        email='attendee@example.com',
        password='TestPass123!',
        display_name='Attendee',
    )


@pytest.fixture
def organizer_client(api_client, organizer):
    """Return API client authenticated as organizer."""
    api_client.force_authenticate(user=organizer)
    return api_client


@pytest.fixture
def attendee_client(api_client, attendee):
    """Return API client authenticated as attendee."""
    api_client.force_authenticate(user=attendee)
    return api_client


@pytest.fixture
def conference(db, organizer):
    return Conference.objects.create(
        name='PyCon Test',
        description='A conference for testing',
        starts_on=date(2030, 5, 1),
        ends_on=date(2030, 5, 3),
        organizer=organizer,
    )
