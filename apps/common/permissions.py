"""
Role-based permission classes.

Views declare the roles allowed to call them:

    class ProcurementCreateView(generics.CreateAPIView):
        permission_classes = [IsAuthenticated, HasRole]
        required_roles = (Role.MANAGER,)
"""
from rest_framework.permissions import BasePermission


def get_request_role(request):
    """Return the role claim of the authenticated identity, if any."""
    token = getattr(request, 'auth', None)
    if token is not None and hasattr(token, 'get'):
        return token.get('role')
    return getattr(request.user, 'role', None)


class HasRole(BasePermission):
    """
    Permission: the identity's role must be one of ``view.required_roles``.

    A view without ``required_roles`` is open to any authenticated identity.
    """

    message = 'Access denied'

    def has_permission(self, request, view):
        required = tuple(getattr(view, 'required_roles', ()) or ())
        if not required:
            return True

        if get_request_role(request) in required:
            return True

        self.message = f"Access denied: requires role {' or '.join(required)}"
        return False
