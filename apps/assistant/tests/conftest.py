import pytest
from datetime import date
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.assistant.services import IntentAssistant
from apps.catalog.services import ApprovedMedicine, StockCatalog, get_default_catalog


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return a test user."""
    return User.objects.create_user(
        email='chemist@example.com',
        password='TestPass123!',
        display_name='Chemist',
    )


@pytest.fixture
def other_user(db):
    """Create and return another test user."""
    return User.objects.create_user(
        email='otherchemist@example.com',
        password='OtherPass123!',
        display_name='Other Chemist',
    )


@pytest.fixture
def authenticated_client(api_client, user):
    """Return an authenticated API client using JWT."""
    refresh = RefreshToken.for_user(user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def assistant():
    """Assistant over the reference catalog."""
    return IntentAssistant(get_default_catalog(), ('1800-11-4000', '1915'))


@pytest.fixture
def keyword_catalog():
    """Catalog whose names contain the stock keywords, so stock-rule searches can hit."""
    def _medicine(id, name, stock):
        return ApprovedMedicine(
            id=id,
            name=name,
            generic_name=name,
            manufacturer='Test Pharma',
            composition='',
            dosage='',
            approval_date=date(2022, 1, 1),
            regulatory_id=f'REG-{id}',
            stock=stock,
        )
    return StockCatalog([
        _medicine('T-1', 'Stock Syrup', 12),
        _medicine('T-2', 'Availability Drops', 0),
    ])


@pytest.fixture
def delays(settings):
    """Fixed reply and alert delays."""
    settings.ASSISTANT_REPLY_DELAY_MS = 500
    settings.STOCK_ALERT_DELAY_MS = 500
    return settings
