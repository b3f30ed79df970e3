"""
Bearer token authentication.

Any HS256 token signed with ``JWT_SECRET`` is accepted, whichever issuer
produced it. The identity is taken from the signed claims without a database
lookup; the only claim the API relies on is ``role``.
"""
import logging

from django.utils.functional import cached_property
from rest_framework_simplejwt.authentication import JWTStatelessUserAuthentication
from rest_framework_simplejwt.exceptions import AuthenticationFailed, InvalidToken, TokenBackendError
from rest_framework_simplejwt.models import TokenUser
from rest_framework_simplejwt.settings import api_settings
from rest_framework_simplejwt.state import token_backend

logger = logging.getLogger(__name__)


class ClaimsUser(TokenUser):
    """``request.user`` built from decoded claims; every claim is optional."""

    @cached_property
    def id(self):
        return self.token.get(api_settings.USER_ID_CLAIM)

    @cached_property
    def role(self):
        return self.token.get('role')


class BearerTokenAuthentication(JWTStatelessUserAuthentication):
    """
    Accept ``Authorization: <scheme> <token>``.

    The scheme word is not checked; the second part of the header is the
    token. An empty header counts as no credentials, a header without a
    token part is rejected.
    """

    def get_raw_token(self, header):
        parts = header.split()

        if not parts:
            return None

        if len(parts) < 2:
            logger.info('Rejected authorization header without a token part')
            raise AuthenticationFailed('Invalid token', code='bad_authorization_header')

        return parts[1]

    def get_validated_token(self, raw_token):
        """
        Verify the signature (and ``exp`` when present) and return the claims.

        No claim is required, so tokens minted outside this service pass as
        long as they are signed with the shared secret.
        """
        try:
            return token_backend.decode(raw_token, verify=True)
        except TokenBackendError as e:
            logger.info('Rejected token: %s', e)
            raise InvalidToken('Invalid token')

    def get_user(self, validated_token):
        return ClaimsUser(validated_token)
