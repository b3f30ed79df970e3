from rest_framework import status, serializers
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema
from .serializers import (
    UserRegistrationSerializer,
    UserLoginSerializer,
    UserSerializer,
)
from .services import (
    register_user,
    authenticate_user,
    issue_tokens,
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    InactiveAccountError,
)
from apps.common.responses import field_error
from apps.common.views import MessageResponseSerializer, ValidationErrorResponseSerializer


# Response serializers for API documentation
class RegisterResponseSerializer(serializers.Serializer):
    user = UserSerializer()
    token = serializers.CharField()


class LoginResponseSerializer(serializers.Serializer):
    token = serializers.CharField()
    refresh = serializers.CharField()
    user = UserSerializer()


@extend_schema(
    request=UserRegistrationSerializer,
    responses={
        201: RegisterResponseSerializer,
        400: ValidationErrorResponseSerializer,
    },
    description="Register a staff account and receive an access token.",
    tags=['users'],
)
@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def register(request):
    """Register a new staff account."""
    serializer = UserRegistrationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user = register_user(**serializer.validated_data)
    except EmailAlreadyRegisteredError as e:
        return Response({
            'errors': [field_error('email', 'Email is already registered', e.email)]
        }, status=status.HTTP_400_BAD_REQUEST)

    tokens = issue_tokens(user)

    return Response({
        'user': UserSerializer(user).data,
        'token': tokens['access'],
    }, status=status.HTTP_201_CREATED)


@extend_schema(
    request=UserLoginSerializer,
    responses={
        200: LoginResponseSerializer,
        400: ValidationErrorResponseSerializer,
        401: MessageResponseSerializer,
        403: MessageResponseSerializer,
    },
    description="Authenticate with email and password to receive a JWT.",
    tags=['users'],
)
@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def login(request):
    """Login with email and password."""
    serializer = UserLoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user = authenticate_user(**serializer.validated_data)
    except InvalidCredentialsError:
        return Response({
            'message': 'Invalid credentials'
        }, status=status.HTTP_401_UNAUTHORIZED)
    except InactiveAccountError:
        return Response({
            'message': 'Account is deactivated'
        }, status=status.HTTP_403_FORBIDDEN)

    tokens = issue_tokens(user)

    return Response({
        'token': tokens['access'],
        'refresh': tokens['refresh'],
        'user': UserSerializer(user).data,
    })
