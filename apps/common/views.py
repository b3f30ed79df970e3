from rest_framework import generics, status, serializers as drf_serializers
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from .exceptions import RecordValidationError, RecordPersistenceError
from .permissions import HasRole


# Response serializers for API documentation
class FieldErrorSerializer(drf_serializers.Serializer):
    type = drf_serializers.CharField()
    value = drf_serializers.JSONField(allow_null=True)
    msg = drf_serializers.CharField()
    path = drf_serializers.CharField()
    location = drf_serializers.CharField()


class ValidationErrorResponseSerializer(drf_serializers.Serializer):
    errors = FieldErrorSerializer(many=True)


class MessageResponseSerializer(drf_serializers.Serializer):
    message = drf_serializers.CharField()


class RecordCreateAPIView(generics.CreateAPIView):
    """
    Base view for recording a trade transaction.

    Subclasses set ``serializer_class``, ``required_roles`` and
    ``record_service``. The service receives the validated data and returns
    the saved record, which is echoed back with status 201.
    """

    permission_classes = [IsAuthenticated, HasRole]
    required_roles = ()
    record_service = None

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            record = self.record_service(serializer.validated_data)
        except RecordValidationError as e:
            return Response({'errors': e.errors}, status=status.HTTP_400_BAD_REQUEST)
        except RecordPersistenceError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(self.get_serializer(record).data, status=status.HTTP_201_CREATED)
