import pytest
from django.urls import reverse
from rest_framework import status
from apps.accounts.models import User


# =============================================================================
# User Model Tests
# =============================================================================

@pytest.mark.django_db
class TestUserManager:
    """Tests for email-based user creation."""

    def test_create_user_normalizes_email(self):
        user = User.objects.create_user(email='Someone@EXAMPLE.com', password='TestPass123!')

        assert user.email == 'Someone@example.com'
        assert user.check_password('TestPass123!')
        assert user.is_staff is False

    def test_create_user_requires_email(self):
        with pytest.raises(ValueError):
            User.objects.create_user(email='', password='TestPass123!')

    def test_create_superuser(self):
        admin = User.objects.create_superuser(email='admin@example.com', password='TestPass123!')

        assert admin.is_staff is True
        assert admin.is_superuser is True

    def test_display_name_falls_back_to_email(self):
        user = User.objects.create_user(email='jordan@example.com', password='TestPass123!')

        assert user.get_display_name() == 'jordan'


# =============================================================================
# Token Tests
# =============================================================================

@pytest.mark.django_db
class TestTokenObtain:
    """Tests for POST /api/auth/token/"""

    def test_obtain_token(self, api_client, user):
        url = reverse('token_obtain_pair')
        data = {'email': 'testuser@example.com', 'password': 'TestPass123!'}
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_200_OK
        assert 'access' in response.data
        assert 'refresh' in response.data

    def test_wrong_password(self, api_client, user):
        url = reverse('token_obtain_pair')
        data = {'email': 'testuser@example.com', 'password': 'WrongPass!'}
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_inactive_user(self, api_client, user_inactive):
        url = reverse('token_obtain_pair')
        data = {'email': 'inactive@example.com', 'password': 'TestPass123!'}
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_refresh_token(self, api_client, user):
        tokens = api_client.post(
            reverse('token_obtain_pair'),
            {'email': 'testuser@example.com', 'password': 'TestPass123!'},
        ).data

        response = api_client.post(reverse('token_refresh'), {'refresh': tokens['refresh']})

        assert response.status_code == status.HTTP_200_OK
        assert 'access' in response.data

    def test_access_token_authenticates(self, api_client, user):
        tokens = api_client.post(
            reverse('token_obtain_pair'),
            {'email': 'testuser@example.com', 'password': 'TestPass123!'},
        ).data
        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {tokens['access']}")

        response = api_client.get(reverse('payments:payment-list'))

        assert response.status_code == status.HTTP_200_OK


@pytest.mark.django_db
class TestHealthCheck:

    def test_health(self, api_client):
        response = api_client.get(reverse('health-check'))

        assert response.status_code == status.HTTP_200_OK
