import pytest
from datetime import timedelta
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from apps.catalog.models import NewsAlert
from apps.catalog.services import get_daily_code


# =============================================================================
# Stock Lookup Tests
# =============================================================================

@pytest.mark.django_db
class TestStockLookup:
    """Tests for GET /api/catalog/stock/"""

    def test_out_of_stock(self, authenticated_client):
        response = authenticated_client.get(reverse('catalog:stock-lookup'), {'q': 'omep'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['found'] is True
        assert response.data['in_stock'] is False
        assert response.data['medicine']['name'] == 'Omeprazole'

    def test_not_found(self, authenticated_client):
        response = authenticated_client.get(reverse('catalog:stock-lookup'), {'q': 'aspirin'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['found'] is False
        assert response.data['medicine'] is None

    def test_missing_query(self, authenticated_client):
        response = authenticated_client.get(reverse('catalog:stock-lookup'))
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_requires_authentication(self, api_client):
        response = api_client.get(reverse('catalog:stock-lookup'), {'q': 'amox'})
        assert response.status_code == status.HTTP_401_UNAUTHORIZED


# =============================================================================
# Database Access Tests
# =============================================================================

@pytest.mark.django_db
class TestDatabaseAccess:

    def test_locked_by_default(self, authenticated_client):
        response = authenticated_client.get(reverse('catalog:medicine-list'))
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_unlock_then_search(self, authenticated_client):
        response = authenticated_client.post(
            reverse('catalog:unlock'),
            {'code': get_daily_code()},
            format='json',
        )
        assert response.status_code == status.HTTP_200_OK
        assert response.data['message'] == 'Access granted'

        response = authenticated_client.get(reverse('catalog:medicine-list'), {'search': 'cardio'})
        assert response.status_code == status.HTTP_200_OK
        assert [m['name'] for m in response.data] == ['Atorvastatin']

    def test_invalid_code(self, authenticated_client):
        get_daily_code()
        response = authenticated_client.post(reverse('catalog:unlock'), {'code': '00000000'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Invalid code'
        assert response.data['detail'] == 'Please enter the correct 8-digit code'

    def test_malformed_code(self, authenticated_client):
        response = authenticated_client.post(reverse('catalog:unlock'), {'code': '12ab'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Invalid code'

    def test_staff_reveals_code(self, staff_client):
        response = staff_client.get(reverse('catalog:access-code'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['code'] == get_daily_code()

    def test_non_staff_cannot_reveal_code(self, authenticated_client):
        response = authenticated_client.get(reverse('catalog:access-code'))
        assert response.status_code == status.HTTP_403_FORBIDDEN


# =============================================================================
# News Alert Tests
# =============================================================================

@pytest.mark.django_db
class TestNewsAlerts:
    """Tests for GET /api/catalog/news/"""

    def test_newest_first(self, authenticated_client):
        now = timezone.now()
        NewsAlert.objects.create(
            title='Older recall',
            description='Batch recalled',
            source='CDSCO',
            published_at=now - timedelta(days=2),
            category='recall',
            severity='medium',
        )
        NewsAlert.objects.create(
            title='Fake antibiotics seized',
            description='Counterfeit amoxicillin found',
            source='WHO',
            published_at=now,
            category='counterfeit',
            severity='high',
        )

        response = authenticated_client.get(reverse('catalog:news-list'))

        assert response.status_code == status.HTTP_200_OK
        assert [a['title'] for a in response.data] == ['Fake antibiotics seized', 'Older recall']
        assert set(response.data[0]) == {
            'id', 'title', 'description', 'source', 'published_at', 'category', 'severity',
        }
        assert response.data[0]['severity'] == 'high'

    def test_empty_feed(self, authenticated_client):
        response = authenticated_client.get(reverse('catalog:news-list'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data == []

    def test_requires_authentication(self, api_client):
        response = api_client.get(reverse('catalog:news-list'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
