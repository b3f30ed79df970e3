"""
Saving trade records.

Views hand validated input to a record service, which builds the model
instance and calls ``save_record``:

    try:
        record = record_procurement(serializer.validated_data)
    except RecordValidationError as e:
        return Response({'errors': e.errors}, status=400)
    except RecordPersistenceError as e:
        return Response({'error': str(e)}, status=400)
"""
import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import DEFAULT_DB_ALIAS, DatabaseError, transaction

from .exceptions import RecordPersistenceError, RecordValidationError
from .responses import field_error
from .serializers import to_camel

logger = logging.getLogger(__name__)


def model_errors(instance, exc: DjangoValidationError) -> list:
    """Convert a ``full_clean`` failure into field error items."""
    errors = []
    for field_name, messages in exc.message_dict.items():
        value = getattr(instance, field_name, None)
        if value is not None and not isinstance(value, (str, int, float, bool)):
            value = str(value)
        for message in messages:
            errors.append(field_error(to_camel(field_name), message, value))
    return errors


def save_record(instance, *, using: str = DEFAULT_DB_ALIAS):
    """
    Run the model's field rules on ``instance`` and insert it.

    Args:
        instance: Unsaved model instance
        using: Database alias to write to

    Returns:
        The saved instance

    Raises:
        RecordValidationError: If the model rejects one or more fields
        RecordPersistenceError: If the database rejects the write
    """
    try:
        instance.full_clean()
    except DjangoValidationError as e:
        errors = model_errors(instance, e)
        logger.warning(
            "%s rejected at save time: %s",
            type(instance).__name__,
            ', '.join(error['path'] for error in errors),
        )
        raise RecordValidationError(errors)

    try:
        with transaction.atomic(using=using):
            instance.save(using=using, force_insert=True)
    except DatabaseError as e:
        logger.warning("%s could not be saved: %s", type(instance).__name__, e)
        raise RecordPersistenceError(str(e))

    logger.info("Recorded %s %s", type(instance).__name__, instance.pk)
    return instance
