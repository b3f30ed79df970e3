from drf_spectacular.utils import extend_schema
from apps.accounts.models import Role
from apps.common.views import (
    RecordCreateAPIView,
    ValidationErrorResponseSerializer,
    MessageResponseSerializer,
)
from .serializers import CashSaleSerializer, CreditSaleSerializer
from .services import record_cash_sale, record_credit_sale


SALE_RESPONSES = {
    400: ValidationErrorResponseSerializer,
    401: MessageResponseSerializer,
    403: MessageResponseSerializer,
}


@extend_schema(
    responses={201: CashSaleSerializer, **SALE_RESPONSES},
    description="Record a new cash sale (sales agents only).",
    tags=['sales'],
)
class CashSaleCreateView(RecordCreateAPIView):
    """POST /sales/cash"""

    serializer_class = CashSaleSerializer
    required_roles = (Role.SALES_AGENT,)
    record_service = staticmethod(record_cash_sale)


@extend_schema(
    responses={201: CreditSaleSerializer, **SALE_RESPONSES},
    description="Record a new credit/deferred sale (sales agents only).",
    tags=['sales'],
)
class CreditSaleCreateView(RecordCreateAPIView):
    """POST /sales/credit"""

    serializer_class = CreditSaleSerializer
    required_roles = (Role.SALES_AGENT,)
    record_service = staticmethod(record_credit_sale)
