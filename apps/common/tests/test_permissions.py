from types import SimpleNamespace
from django.contrib.auth.models import AnonymousUser
from rest_framework.test import APIRequestFactory
from apps.common.permissions import HasRole, get_request_role


def make_request(role=None):
    factory = APIRequestFactory()
    request = factory.post('/')
    request.user = AnonymousUser()
    request.auth = None if role is None else {'user_id': 'u1', 'role': role}
    return request


# =============================================================================
# get_request_role Tests
# =============================================================================

class TestGetRequestRole:

    def test_role_from_token_claims(self):
        assert get_request_role(make_request('manager')) == 'manager'

    def test_falls_back_to_user_role(self):
        request = make_request()
        request.user = SimpleNamespace(role='director')

        assert get_request_role(request) == 'director'

    def test_no_role(self):
        assert get_request_role(make_request()) is None


# =============================================================================
# HasRole Tests
# =============================================================================

class TestHasRole:

    def test_matching_role_allowed(self):
        view = SimpleNamespace(required_roles=('manager',))

        assert HasRole().has_permission(make_request('manager'), view) is True

    def test_other_role_denied(self):
        view = SimpleNamespace(required_roles=('manager',))
        permission = HasRole()

        assert permission.has_permission(make_request('SalesAgent'), view) is False
        assert permission.message == 'Access denied: requires role manager'

    def test_role_names_are_case_sensitive(self):
        view = SimpleNamespace(required_roles=('SalesAgent',))

        assert HasRole().has_permission(make_request('salesagent'), view) is False

    def test_several_roles(self):
        view = SimpleNamespace(required_roles=('manager', 'director'))
        permission = HasRole()

        assert permission.has_permission(make_request('director'), view) is True
        assert permission.has_permission(make_request('SalesAgent'), view) is False
        assert permission.message == 'Access denied: requires role manager or director'

    def test_missing_role_claim_denied(self):
        view = SimpleNamespace(required_roles=('manager',))

        assert HasRole().has_permission(make_request(), view) is False

    def test_view_without_roles_allows_anyone(self):
        assert HasRole().has_permission(make_request('SalesAgent'), SimpleNamespace()) is True
