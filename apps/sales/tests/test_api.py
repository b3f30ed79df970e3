import pytest
from django.urls import reverse
from rest_framework import status
from apps.sales.models import CashSale, CreditSale


CASH_URL = '/sales/cash'
CREDIT_URL = '/sales/credit'


def test_sale_routes():
    assert reverse('sales:cash-sale-create') == CASH_URL
    assert reverse('sales:credit-sale-create') == CREDIT_URL


# =============================================================================
# Access
# =============================================================================

@pytest.mark.django_db
class TestSaleAccess:
    """Auth and role gate on both sale endpoints."""

    @pytest.mark.parametrize('url', [CASH_URL, CREDIT_URL])
    def test_missing_token(self, api_client, url):
        response = api_client.post(url, {}, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data == {'message': 'No token'}

    @pytest.mark.parametrize('url', [CASH_URL, CREDIT_URL])
    def test_garbage_token(self, api_client, url):
        api_client.credentials(HTTP_AUTHORIZATION='Bearer not.a.jwt')
        response = api_client.post(url, {}, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data == {'message': 'Invalid token'}

    def test_manager_cannot_record_cash_sale(self, manager_client, cash_payload):
        response = manager_client.post(CASH_URL, cash_payload, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data == {'message': 'Access denied: requires role SalesAgent'}
        assert CashSale.objects.count() == 0

    def test_manager_cannot_record_credit_sale(self, manager_client, credit_payload):
        response = manager_client.post(CREDIT_URL, credit_payload, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert CreditSale.objects.count() == 0


# =============================================================================
# Cash sales
# =============================================================================

@pytest.mark.django_db
class TestCashSale:
    """Tests for POST /sales/cash"""

    def test_create_cash_sale(self, sales_agent_client, cash_payload):
        response = sales_agent_client.post(CASH_URL, cash_payload, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['type'] == 'Cash'
        assert response.data['salesAgentName'] == 'Agent 007'
        assert response.data['amountPaid'] == 50000

        sale = CashSale.objects.get(id=response.data['id'])
        assert sale.type == 'Cash'
        assert sale.buyer_name == 'Nakato Foods'

    def test_type_cannot_be_chosen_by_client(self, sales_agent_client, cash_payload):
        cash_payload['type'] = 'Credit'
        response = sales_agent_client.post(CASH_URL, cash_payload, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['type'] == 'Cash'
        assert CreditSale.objects.count() == 0

    def test_credit_fields_are_ignored(self, sales_agent_client, cash_payload):
        cash_payload.update({'nin': 'CM1234567890AB', 'dueDate': '2026-03-01'})
        response = sales_agent_client.post(CASH_URL, cash_payload, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert 'nin' not in response.data
        assert 'dueDate' not in response.data

    def test_every_violation_reported(self, sales_agent_client):
        body = {
            'produceName': 'Bean$',
            'tonnage': 'heavy',
            'amountPaid': 500,
            'buyerName': 'J',
            'salesAgentName': 'Agent 007',
            'date': '',
        }
        response = sales_agent_client.post(CASH_URL, body, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        errors = response.data['errors']
        assert len(errors) == 7
        assert {error['path'] for error in errors} == {
            'produceName', 'tonnage', 'amountPaid', 'buyerName', 'date', 'time',
        }
        assert all(error['type'] == 'field' and error['location'] == 'body' for error in errors)

        by_path = {error['path']: error for error in errors}
        assert by_path['tonnage']['value'] == 'heavy'
        assert [error['msg'] for error in errors if error['path'] == 'tonnage'] == [
            'Tonnage must be a number',
            'Tonnage must be at least 100',
        ]
        assert by_path['amountPaid']['msg'] == 'Amount Paid must be at least 10000'
        assert by_path['buyerName']['msg'] == 'Buyer Name must be at least 2 characters'
        assert by_path['time']['msg'] == 'Time cannot be empty'
        assert CashSale.objects.count() == 0

    def test_identical_sales_are_both_recorded(self, sales_agent_client, cash_payload):
        sales_agent_client.post(CASH_URL, cash_payload, format='json')
        sales_agent_client.post(CASH_URL, cash_payload, format='json')

        assert CashSale.objects.count() == 2


# =============================================================================
# Credit sales
# =============================================================================

@pytest.mark.django_db
class TestCreditSale:
    """Tests for POST /sales/credit"""

    def test_create_credit_sale(self, sales_agent_client, credit_payload):
        response = sales_agent_client.post(CREDIT_URL, credit_payload, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['type'] == 'Credit'
        assert response.data['nin'] == 'CM1234567890AB'
        assert response.data['dueDate'] == '2026-03-14'

        sale = CreditSale.objects.get(id=response.data['id'])
        assert sale.location == 'Kampala City'
        assert sale.amount_due == 10000

    def test_type_cannot_be_chosen_by_client(self, sales_agent_client, credit_payload):
        credit_payload['type'] = 'Cash'
        response = sales_agent_client.post(CREDIT_URL, credit_payload, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['type'] == 'Credit'
        assert CashSale.objects.count() == 0

    def test_cash_body_is_rejected(self, sales_agent_client, cash_payload):
        """A credit sale needs its own fields."""
        response = sales_agent_client.post(CREDIT_URL, cash_payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        paths = {error['path'] for error in response.data['errors']}
        assert paths == {
            'produceType', 'amountDue', 'nin', 'location', 'contact', 'dueDate', 'dispatchDate',
        }

    def test_every_violation_reported(self, sales_agent_client, credit_payload):
        credit_payload.update({
            'nin': 'TooShort',
            'contact': 'not-a-phone',
            'amountDue': 5000,
            'dueDate': '',
        })
        response = sales_agent_client.post(CREDIT_URL, credit_payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        errors = response.data['errors']
        assert len(errors) == 5

        messages = [error['msg'] for error in errors if error['path'] == 'nin']
        assert messages == ['NIN must be valid format', 'NIN must be at least 13 characters']
        assert [error['path'] for error in errors if error['path'] != 'nin'] == [
            'amountDue', 'contact', 'dueDate',
        ]
        assert CreditSale.objects.count() == 0

    def test_lowercase_nin_rejected(self, sales_agent_client, credit_payload):
        credit_payload['nin'] = 'cm1234567890ab'
        response = sales_agent_client.post(CREDIT_URL, credit_payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['errors'][0]['msg'] == 'NIN must be valid format'

    def test_timestamps_for_dates(self, sales_agent_client, credit_payload):
        credit_payload.update({
            'dueDate': '2026-03-14T00:00:00.000Z',
            'dispatchDate': '2026-02-14T09:15:00+03:00',
        })
        response = sales_agent_client.post(CREDIT_URL, credit_payload, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['dueDate'] == '2026-03-14'
        assert response.data['dispatchDate'] == '2026-02-14'
