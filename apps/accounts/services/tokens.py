"""JWT issuing for authenticated users."""

from rest_framework_simplejwt.tokens import RefreshToken


def issue_tokens(user) -> dict:
    """
    Issue a refresh/access pair for ``user``.

    The access token carries ``role`` and ``name`` claims next to
    ``user_id``; the role gate reads ``role`` straight from the token.
    """
    refresh = RefreshToken.for_user(user)
    refresh['role'] = user.role
    refresh['name'] = user.name

    return {
        'refresh': str(refresh),
        'access': str(refresh.access_token),
    }
