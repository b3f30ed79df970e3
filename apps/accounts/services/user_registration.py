"""Staff account registration."""

import logging

from django.db import transaction, IntegrityError
from django.contrib.auth import get_user_model

from .exceptions import EmailAlreadyRegisteredError

User = get_user_model()

logger = logging.getLogger(__name__)


def register_user(*, email: str, password: str, name: str, role: str) -> User:
    """
    Create a staff account with a hashed password.

    ``role`` is stored on the account and copied into every token issued
    for it; it is what the procurement and sales endpoints check.

    Raises:
        EmailAlreadyRegisteredError: If the email is taken. The serializer
            already checks this; the error covers two concurrent requests.
    """
    try:
        with transaction.atomic():
            user = User.objects.create_user(
                email=email,
                password=password,
                name=name,
                role=role,
            )
    except IntegrityError:
        logger.warning("Registration race on %s", email)
        raise EmailAlreadyRegisteredError(email)

    logger.info("Registered user %s with role %s", user.id, user.role)
    return user
