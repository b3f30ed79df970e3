import pytest
from rest_framework.test import APIClient
from apps.accounts.models import User, Role
from apps.accounts.services import issue_tokens


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
def sales_agent(db):
    """Create and return a sales agent."""
    return User.objects.create_user(
        email='agent@kgl.example.com',
        password='TestPass123!',
        name='Sales Agent',
        role=Role.SALES_AGENT,
    )


@pytest.fixture
def manager_client(api_client, manager):
    """Return API client authenticated as a manager."""
    api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_tokens(manager)['access']}")
    return api_client


@pytest.fixture
def sales_agent_client(api_client, sales_agent):
    """Return API client authenticated as a sales agent."""
    api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_tokens(sales_agent)['access']}")
    return api_client


@pytest.fixture
def procurement_payload():
    """A procurement body that satisfies every field rule."""
    return {
        'produceName': 'Maize',
        'produceType': 'Cereal',
        'date': '2026-02-14',
        'time': '10:30',
        'tonnage': 150,
        'cost': 20000,
        'dealerName': 'Kato Traders',
        'branch': 'Maganjo',
        'contact': '+256 700 123456',
        'sellingPrice': 15000,
    }
