from rest_framework import serializers
from rest_framework.validators import UniqueValidator
from django.contrib.auth.password_validation import validate_password
from .models import User, Role


class UserSerializer(serializers.ModelSerializer):
    """Account as returned by /users and /users/login."""

    class Meta:
        model = User
        fields = ['id', 'email', 'name', 'role', 'created_at']
        read_only_fields = fields


class UserRegistrationSerializer(serializers.ModelSerializer):
    """
    Body of POST /users.

    Emails are stored lower-cased so that login and the uniqueness check
    agree regardless of how the address was typed.
    """

    email = serializers.EmailField(
        max_length=255,
        validators=[UniqueValidator(
            queryset=User.objects.all(),
            lookup='iexact',
            message='Email is already registered',
        )],
    )
    password = serializers.CharField(
        write_only=True,
        validators=[validate_password],
        style={'input_type': 'password'},
    )
    role = serializers.ChoiceField(
        choices=Role.choices,
        error_messages={
            'invalid_choice': f"Role must be one of: {', '.join(Role.values)}",
        },
    )

    class Meta:
        model = User
        fields = ['name', 'email', 'password', 'role']

    def validate_email(self, value):
        return value.lower()


class UserLoginSerializer(serializers.Serializer):
    """Body of POST /users/login."""

    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, style={'input_type': 'password'})
