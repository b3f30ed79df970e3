import pytest
from rest_framework.test import APIClient
from apps.accounts.models import User, Role


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def manager(db):
    """Create and return a branch manager."""
    return User.objects.create_user(
        email='manager@kgl.example.com',
        password='TestPass123!',
        name='Branch Manager',
        role=Role.MANAGER,
    )


@pytest.fixture
def inactive_agent(db):
    """Create and return a deactivated sales agent."""
    return User.objects.create_user(
        email='former.agent@kgl.example.com',
        password='TestPass123!',
        name='Former Agent',
        role=Role.SALES_AGENT,
        is_active=False,
    )


@pytest.fixture
def registration_data():
    return {
        'name': 'Sarah Namubiru',
        'email': 'sarah@kgl.example.com',
        'password': 'SecurePass123!',
        'role': Role.SALES_AGENT,
    }
