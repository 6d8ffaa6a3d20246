import pytest
from datetime import datetime, timezone as dt_timezone
from types import SimpleNamespace
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.scans.models import ScanRecord


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return a test user."""
    return User.objects.create_user(
        email='inspector@example.com',
        password='TestPass123!',
        display_name='Inspector',
    )


@pytest.fixture
def other_user(db):
    """Create and return another test user."""
    return User.objects.create_user(
        email='otherinspector@example.com',
        password='OtherPass123!',
        display_name='Other Inspector',
    )


@pytest.fixture
def authenticated_client(api_client, user):
    """Return an authenticated API client using JWT."""
    refresh = RefreshToken.for_user(user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def make_scan(db, user):
    """Factory for stored scan records owned by ``user`` unless told otherwise."""
    def _make_scan(**kwargs):
        kwargs.setdefault('owner', user)
        kwargs.setdefault('medicine_name', 'Amoxicillin 500mg')
        kwargs.setdefault('batch_number', 'AMX2024-Q1-001')
        kwargs.setdefault('manufacturer', 'PharmaCorp Ltd')
        kwargs.setdefault('quality_score', 95)
        return ScanRecord.objects.create(**kwargs)
    return _make_scan


@pytest.fixture
def record():
    """Factory for unsaved record stand-ins used by the pure engine tests."""
    def _record(**kwargs):
        defaults = {
            'id': 'SCN-001',
            'medicine_name': 'Amoxicillin 500mg',
            'batch_number': 'AMX2024-Q1-001',
            'manufacturer': 'PharmaCorp Ltd',
            'dosage': '500mg Capsules',
            'scan_date': datetime(2024, 1, 15, 10, 30, tzinfo=dt_timezone.utc),
            'expiry_date': None,
            'quality_score': 95,
            'is_approved': None,
            'analysis_details': {},
        }
        defaults.update(kwargs)
        return SimpleNamespace(**defaults)
    return _record
