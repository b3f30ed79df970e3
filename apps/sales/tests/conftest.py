import pytest
from rest_framework.test import APIClient
from apps.accounts.models import User, Role
from apps.accounts.services import issue_tokens


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


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
def manager(db):
    """Create and return a branch manager."""
    return User.objects.create_user(
        email='manager@kgl.example.com',
        password='TestPass123!',
        name='Branch Manager',
        role=Role.MANAGER,
    )


@pytest.fixture
def sales_agent_client(api_client, sales_agent):
    """Return API client authenticated as a sales agent."""
    api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_tokens(sales_agent)['access']}")
    return api_client


@pytest.fixture
def manager_client(api_client, manager):
    """Return API client authenticated as a manager."""
    api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_tokens(manager)['access']}")
    return api_client


@pytest.fixture
def cash_payload():
    """A cash sale body that satisfies every field rule."""
    return {
        'produceName': 'Beans',
        'tonnage': 200,
        'amountPaid': 50000,
        'buyerName': 'Nakato Foods',
        'salesAgentName': 'Agent 007',
        'date': '2026-02-14',
        'time': '14:05',
    }


@pytest.fixture
def credit_payload():
    """A credit sale body that satisfies every field rule."""
    return {
        'produceName': 'Maize',
        'produceType': 'Cereal',
        'tonnage': 100,
        'amountDue': 10000,
        'buyerName': 'ValidBuyer',
        'salesAgentName': 'ValidAgent',
        'nin': 'CM1234567890AB',
        'location': 'Kampala City',
        'contact': '0772-123-456',
        'dueDate': '2026-03-14',
        'dispatchDate': '2026-02-14',
    }
