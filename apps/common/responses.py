"""
API error shaping.

Every error body produced by the API has one of these shapes:

    401  {"message": "No token"} / {"message": "Invalid token"}
    403  {"message": "Access denied: ..."}
    400  {"errors": [{"type": "field", "value": ..., "msg": ...,
                      "path": ..., "location": "body"}, ...]}
    400  {"error": "<persistence error message>"}

Field error items follow the express-validator layout so clients see the
same structure whether a request was rejected by the serializer or by the
model's own validation at save time.
"""
import logging

from rest_framework import exceptions
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)

NON_FIELD_PATH = 'non_field_errors'


def field_error(path, message, value=None):
    """Build a single field error item."""
    return {
        'type': 'field',
        'value': value,
        'msg': str(message),
        'path': path,
        'location': 'body',
    }


def flatten_field_errors(detail, data=None):
    """
    Flatten a DRF validation ``detail`` into a list of field error items.

    Every message of every field becomes its own item, in field order.
    ``data`` is the submitted body; submitted values are echoed back.
    """
    data = data if hasattr(data, 'get') else {}

    if isinstance(detail, dict):
        errors = []
        for path, messages in detail.items():
            if not isinstance(messages, (list, tuple)):
                messages = [messages]
            for message in messages:
                if isinstance(message, dict):
                    errors.extend(flatten_field_errors(message, data.get(path)))
                else:
                    errors.append(field_error(path, message, data.get(path)))
        return errors

    if isinstance(detail, (list, tuple)):
        return [field_error(NON_FIELD_PATH, message) for message in detail]

    return [field_error(NON_FIELD_PATH, detail)]


def trading_exception_handler(exc, context):
    """DRF EXCEPTION_HANDLER that rewrites error bodies into the API shapes."""
    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, exceptions.NotAuthenticated):
        response.data = {'message': 'No token'}
    elif isinstance(exc, exceptions.AuthenticationFailed):
        response.data = {'message': 'Invalid token'}
    elif isinstance(exc, exceptions.PermissionDenied):
        response.data = {'message': str(exc.detail)}
    elif isinstance(exc, exceptions.ValidationError):
        request = context.get('request')
        data = getattr(request, 'data', None) if request is not None else None
        response.data = {'errors': flatten_field_errors(exc.detail, data)}
    else:
        detail = response.data
        if isinstance(detail, dict):
            detail = detail.get('detail', detail)
        response.data = {'error': str(detail)}

    return response
