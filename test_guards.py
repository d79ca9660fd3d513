import pytest

from conftest import api_identity
from models.permission import ALL_PERMISSIONS, permissions_for
from services.errors import ErrorKind
from services.guards import (DEACTIVATE, DELETE, ROLE_CHANGE, check_self_modification,
                             require_authenticated, require_permission, require_role)
from services.identity import ApiKeyIdentity, SessionIdentity


class FakeUser:
    def __init__(self, id, role="admin"):
        self.id = id
        self.role = role


def test_require_authenticated():
    assert require_authenticated(None).error.kind is ErrorKind.UNAUTHENTICATED
    identity = SessionIdentity(1, "admin", "admin")
    assert require_authenticated(identity).value is identity


def test_require_role():
    identity = SessionIdentity(2, "mia", "manager")
    assert require_role(identity, {"manager", "admin"}).ok
    denied = require_role(identity, {"admin"})
    assert denied.error.kind is ErrorKind.FORBIDDEN
    assert require_role(None, {"admin"}).error.kind is ErrorKind.UNAUTHENTICATED


def test_require_role_denies_api_keys():
    identity = ApiKeyIdentity(1, 1, tuple(ALL_PERMISSIONS), "all")
    assert require_role(identity, {"admin"}).error.kind is ErrorKind.FORBIDDEN


@pytest.mark.parametrize("role", ["admin", "manager", "translator", "viewer", "ghost"])
@pytest.mark.parametrize("permission", ALL_PERMISSIONS)
def test_session_permission_follows_role(role, permission):
    result = require_permission(SessionIdentity(3, "u", role), permission)
    assert result.ok == (permission in permissions_for(role))
    if not result.ok:
        assert result.error.kind is ErrorKind.FORBIDDEN
        assert result.error.code == "permission_denied"


@pytest.mark.parametrize("grant", [(), ("view",), ("view", "translate"), ("review",),
                                   ALL_PERMISSIONS])
@pytest.mark.parametrize("permission", ALL_PERMISSIONS)
def test_api_key_permission_follows_grant(grant, permission):
    result = require_permission(ApiKeyIdentity(4, 1, grant, "k"), permission)
    assert result.ok == (permission in grant)


def test_api_key_denial_reports_required_and_granted():
    owner = FakeUser(1, role="admin")
    result = require_permission(api_identity(owner, ["view"]), "manage_translations")
    assert result.error.kind is ErrorKind.FORBIDDEN
    assert result.error.code == "insufficient_permissions"
    assert result.error.details["required"] == ["manage_translations"]
    assert result.error.details["granted"] == ["view"]


def test_api_key_grant_is_independent_of_owner_role():
    # A viewer-owned key with a broad grant keeps its grant.
    owner = FakeUser(9, role="viewer")
    identity = api_identity(owner, ["manage_languages"])
    assert require_permission(identity, "manage_languages").ok
    assert not require_permission(identity, "view").ok


@pytest.mark.parametrize("action", [ROLE_CHANGE, DEACTIVATE, DELETE])
def test_self_modification_denied(action):
    identity = SessionIdentity(1, "admin", "admin")
    result = check_self_modification(identity, 1, action)
    assert result.error.kind is ErrorKind.FORBIDDEN
    assert result.error.code == "self_modification"
    assert "own" in result.error.message


@pytest.mark.parametrize("action", [ROLE_CHANGE, DEACTIVATE, DELETE])
def test_modifying_others_allowed(action):
    identity = SessionIdentity(1, "admin", "admin")
    assert check_self_modification(identity, 2, action).ok


def test_profile_edit_of_self_allowed():
    identity = SessionIdentity(1, "admin", "admin")
    assert check_self_modification(identity, "1", None).ok
