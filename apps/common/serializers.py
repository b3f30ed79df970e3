import re

from django.db import models
from rest_framework import serializers
from rest_framework.settings import ISO_8601

from .validators import MinimumValueValidator


_CAMEL_BOUNDARY = re.compile(r'_([a-z0-9])')

# Plain dates plus full ISO 8601 timestamps; a timestamp keeps its calendar date.
DATE_INPUT_FORMATS = [
    ISO_8601,
    '%Y-%m-%dT%H:%M:%S.%f%z',
    '%Y-%m-%dT%H:%M:%S%z',
    '%Y-%m-%dT%H:%M:%S.%f',
    '%Y-%m-%dT%H:%M:%S',
    '%Y-%m-%dT%H:%M',
]


def to_camel(name):
    """``selling_price`` -> ``sellingPrice``."""
    return _CAMEL_BOUNDARY.sub(lambda match: match.group(1).upper(), name)


def _is_numeric(value):
    try:
        float(value)
    except (TypeError, ValueError):
        return False
    return not isinstance(value, bool)


class WholeNumberField(serializers.IntegerField):
    """
    IntegerField that reports every rule a rejected value breaks.

    A value that is not a whole number also fails each minimum declared on
    the model field, so ``"heavy"`` for tonnage yields both "must be a
    number" and "must be at least 100". A number with a fraction only
    yields the minimums.
    """

    def to_internal_value(self, data):
        try:
            return super().to_internal_value(data)
        except serializers.ValidationError as exc:
            minimums = [
                str(validator.message)
                for validator in self.validators
                if isinstance(validator, MinimumValueValidator)
            ]
            detail = minimums if _is_numeric(data) else list(exc.detail) + minimums
            raise serializers.ValidationError(detail or exc.detail)


class CamelCaseModelSerializer(serializers.ModelSerializer):
    """
    ModelSerializer that exposes snake_case model fields under camelCase names.

    Fields are still built from the model (validators included); only the
    public name changes, ``source`` keeps pointing at the model attribute.
    Validation errors are therefore keyed by the camelCase name and
    ``validated_data`` by the model attribute.
    """

    serializer_field_mapping = {
        **serializers.ModelSerializer.serializer_field_mapping,
        models.IntegerField: WholeNumberField,
    }

    def get_fields(self):
        fields = {}
        for name, field in super().get_fields().items():
            public_name = to_camel(name)
            if public_name != name and field.source is None:
                field.source = name
            fields[public_name] = field
        return fields


def presence_messages(label, **extra):
    """Error messages for a missing, blank or null field named ``label``."""
    messages = {
        'required': f'{label} cannot be empty',
        'blank': f'{label} cannot be empty',
        'null': f'{label} cannot be empty',
    }
    messages.update(extra)
    return {'error_messages': messages}


def iso_date(label):
    """Field kwargs for a date that may be sent as a date or a timestamp."""
    kwargs = presence_messages(label, invalid=f'{label} must be a valid ISO 8601 date')
    kwargs['input_formats'] = DATE_INPUT_FORMATS
    return kwargs
