"""Login for staff accounts."""

import logging

from django.contrib.auth import get_user_model
from django.contrib.auth.models import update_last_login

from .exceptions import InvalidCredentialsError, InactiveAccountError

User = get_user_model()

logger = logging.getLogger(__name__)


def authenticate_user(*, email: str, password: str) -> User:
    """
    Check a staff member's email and password.

    Emails match case-insensitively. A deactivated account is reported only
    after the password has been verified, so the response does not reveal
    which emails belong to former staff.

    Raises:
        InvalidCredentialsError: Unknown email or wrong password
        InactiveAccountError: Correct password on a deactivated account
    """
    user = User.objects.filter(email__iexact=email).first()

    if user is None or not user.check_password(password):
        logger.info("Login rejected for %s", email)
        raise InvalidCredentialsError("Invalid credentials")

    if not user.is_active:
        logger.info("Login rejected for deactivated user %s", user.id)
        raise InactiveAccountError("Account is deactivated")

    update_last_login(None, user)
    logger.info("User %s logged in as %s", user.id, user.role)
    return user
