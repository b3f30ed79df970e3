from drf_spectacular.utils import extend_schema
from apps.accounts.models import Role
from apps.common.views import (
    RecordCreateAPIView,
    ValidationErrorResponseSerializer,
    MessageResponseSerializer,
)
from .serializers import ProcurementRecordSerializer
from .services import record_procurement


@extend_schema(
    responses={
        201: ProcurementRecordSerializer,
        400: ValidationErrorResponseSerializer,
        401: MessageResponseSerializer,
        403: MessageResponseSerializer,
    },
    description="Record new produce bought by KGL (managers only).",
    tags=['procurement'],
)
class ProcurementCreateView(RecordCreateAPIView):
    """POST /procurement"""

    serializer_class = ProcurementRecordSerializer
    required_roles = (Role.MANAGER,)
    record_service = staticmethod(record_procurement)
