"""
Test configuration for the bonus points server.
"""
import pytest
import os
import django
from decimal import Decimal


def pytest_configure():
    """Configure Django settings for testing."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'bonus_server.settings.test')
    os.environ.setdefault('ENVIRONMENT', 'test')
    django.setup()


@pytest.fixture
def api_user():
    """Create an authenticated API user."""
    from tests.factories import UserFactory
    return UserFactory()


@pytest.fixture
def api_client(api_user):
    """API client authenticated as api_user."""
    from rest_framework.test import APIClient
    client = APIClient()
    client.force_authenticate(user=api_user)
    return client


@pytest.fixture
def sample_product():
    """Create a plain product that fires no bonus rule."""
    from tests.factories import ProductFactory
    return ProductFactory(price=Decimal('100.00'))


@pytest.fixture
def premium_customer(sample_product):
    """Create a premium customer whose favorite is sample_product."""
    from tests.factories import PremiumCustomerFactory
    return PremiumCustomerFactory(favorite_product=sample_product)


@pytest.fixture
def regular_customer():
    """Create a non-premium customer without a favorite product."""
    from tests.factories import CustomerFactory
    return CustomerFactory(favorite_product=None)
