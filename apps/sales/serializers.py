from apps.common.serializers import CamelCaseModelSerializer, iso_date, presence_messages
from .models import CashSale, CreditSale


SALE_COMMON_FIELDS = [
    'id',
    'type',
    'produce_name',
    'tonnage',
    'buyer_name',
    'sales_agent_name',
]

SALE_COMMON_MESSAGES = {
    'produce_name': presence_messages('Produce Name'),
    'tonnage': presence_messages('Tonnage', invalid='Tonnage must be a number'),
    'buyer_name': presence_messages('Buyer Name'),
    'sales_agent_name': presence_messages('Sales Agent Name'),
}


class CashSaleSerializer(CamelCaseModelSerializer):
    """Input and output serializer for cash sales; ``type`` is always Cash."""

    class Meta:
        model = CashSale
        fields = SALE_COMMON_FIELDS + [
            'amount_paid',
            'date',
            'time',
        ]
        read_only_fields = ['id', 'type']
        extra_kwargs = {
            **SALE_COMMON_MESSAGES,
            'amount_paid': presence_messages('Amount Paid', invalid='Amount Paid must be a number'),
            'date': iso_date('Date'),
            'time': presence_messages('Time'),
        }


class CreditSaleSerializer(CamelCaseModelSerializer):
    """Input and output serializer for credit sales; ``type`` is always Credit."""

    class Meta:
        model = CreditSale
        fields = SALE_COMMON_FIELDS + [
            'produce_type',
            'amount_due',
            'nin',
            'location',
            'contact',
            'due_date',
            'dispatch_date',
        ]
        read_only_fields = ['id', 'type']
        extra_kwargs = {
            **SALE_COMMON_MESSAGES,
            'produce_type': presence_messages('Produce Type'),
            'amount_due': presence_messages('Amount Due', invalid='Amount Due must be a number'),
            'nin': presence_messages('NIN'),
            'location': presence_messages('Location'),
            'contact': presence_messages('Contact'),
            'due_date': iso_date('Due Date'),
            'dispatch_date': iso_date('Dispatch Date'),
        }
