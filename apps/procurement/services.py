"""Procurement record service."""
from django.db import DEFAULT_DB_ALIAS

from apps.common.records import save_record
from .models import ProcurementRecord


def record_procurement(data: dict, *, using: str = DEFAULT_DB_ALIAS) -> ProcurementRecord:
    """
    Record produce bought by the business.

    Args:
        data: Validated field values keyed by model attribute
        using: Database alias to write to

    Returns:
        The saved ProcurementRecord (with its assigned id)

    Raises:
        RecordValidationError: If the model rejects one or more fields
        RecordPersistenceError: If the database rejects the write
    """
    return save_record(ProcurementRecord(**data), using=using)
