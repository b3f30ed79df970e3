"""
Sale record services.

One service per sale variant; the variant model fixes ``type``.
"""
from django.db import DEFAULT_DB_ALIAS

from apps.common.records import save_record
from .models import CashSale, CreditSale


def record_cash_sale(data: dict, *, using: str = DEFAULT_DB_ALIAS) -> CashSale:
    """
    Record a sale paid in full.

    Raises:
        RecordValidationError: If the model rejects one or more fields
        RecordPersistenceError: If the database rejects the write
    """
    return save_record(CashSale(**data), using=using)


def record_credit_sale(data: dict, *, using: str = DEFAULT_DB_ALIAS) -> CreditSale:
    """
    Record a sale on credit.

    Raises:
        RecordValidationError: If the model rejects one or more fields
        RecordPersistenceError: If the database rejects the write
    """
    return save_record(CreditSale(**data), using=using)
