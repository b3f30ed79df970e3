"""
Field rules shared by the record models.

Model fields are the single source of truth for record validation: the same
validator instances run in the API serializers (ModelSerializer copies them
from the model field) and in ``Model.full_clean()`` before a record is saved.

``MinimumValueValidator`` and ``MinimumLengthValidator`` are not subclasses
of Django's MinValueValidator/MinLengthValidator: DRF turns those into
``min_value``/``min_length`` field arguments with its own messages, while
these stay in the validator list with the message they were declared with.
"""
from django.core.validators import BaseValidator, RegexValidator
from django.utils.deconstruct import deconstructible


ALPHANUMERIC_PATTERN = r'^[a-zA-Z0-9\s]+$'
ALPHABETIC_PATTERN = r'^[a-zA-Z\s]+$'
PHONE_PATTERN = r'^\+?[0-9\s-]{10,}$'
NIN_PATTERN = r'^[A-Z0-9]{13,14}$'

MIN_TONNAGE = 100
MIN_AMOUNT = 10000
MIN_NAME_LENGTH = 2
MIN_NIN_LENGTH = 13


@deconstructible
class MinimumValueValidator(BaseValidator):
    """Reject numbers below ``limit_value``."""

    code = 'min_value'

    def compare(self, a, b):
        return a < b


@deconstructible
class MinimumLengthValidator(BaseValidator):
    """Reject strings shorter than ``limit_value`` characters."""

    code = 'min_length'

    def compare(self, a, b):
        return a < b

    def clean(self, x):
        return len(x)


def alphanumeric(message):
    return RegexValidator(ALPHANUMERIC_PATTERN, message=message, code='alphanumeric')


def alphabetic(message):
    return RegexValidator(ALPHABETIC_PATTERN, message=message, code='alphabetic')


def phone_number(message='Contact must be a valid phone number'):
    return RegexValidator(PHONE_PATTERN, message=message, code='phone')


def nin_format(message='NIN must be valid format'):
    return RegexValidator(NIN_PATTERN, message=message, code='nin')
