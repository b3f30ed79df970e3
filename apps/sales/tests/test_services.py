import pytest
from datetime import date
from apps.common.exceptions import RecordValidationError
from apps.sales.models import CashSale, CreditSale, SaleType
from apps.sales.services import record_cash_sale, record_credit_sale


@pytest.mark.django_db
class TestRecordSales:
    """Tests for the sale record services."""

    def test_cash_sale_type_is_fixed(self):
        sale = record_cash_sale({
            'produce_name': 'Beans',
            'tonnage': 120,
            'buyer_name': 'Nakato Foods',
            'sales_agent_name': 'Agent 007',
            'amount_paid': 30000,
            'date': date(2026, 2, 14),
            'time': '09:00',
        })

        assert CashSale.objects.get(pk=sale.pk).type == SaleType.CASH

    def test_credit_sale_rules_enforced_without_serializer(self):
        with pytest.raises(RecordValidationError) as exc_info:
            record_credit_sale({
                'produce_name': 'Maize',
                'produce_type': 'Cereal',
                'tonnage': 100,
                'buyer_name': 'ValidBuyer',
                'sales_agent_name': 'ValidAgent',
                'amount_due': 20000,
                'nin': 'TooShort',
                'location': 'Gulu',
                'contact': '0772123456',
                'due_date': date(2026, 3, 14),
                'dispatch_date': date(2026, 2, 14),
            })

        assert [error['msg'] for error in exc_info.value.errors] == [
            'NIN must be valid format',
            'NIN must be at least 13 characters',
        ]
        assert CreditSale.objects.count() == 0
