import pytest

from models.permission import (ALL_PERMISSIONS, ALL_ROLES, ROLE_PERMISSIONS, normalize_permissions,
                               ordered, permissions_for, role_has)

EXPECTED = {
    "admin": {"view", "translate", "review", "manage_translations",
              "manage_languages", "manage_users"},
    "manager": {"view", "translate", "review", "manage_translations"},
    "translator": {"view", "translate"},
    "viewer": {"view"},
}


def test_vocabulary_is_the_wire_contract():
    assert ALL_PERMISSIONS == ("view", "translate", "review", "manage_translations",
                               "manage_languages", "manage_users")
    assert ALL_ROLES == ("admin", "manager", "translator", "viewer")


@pytest.mark.parametrize("role", sorted(EXPECTED))
def test_permissions_for_matches_table(role):
    assert permissions_for(role) == EXPECTED[role]
    assert permissions_for(role) == permissions_for(role)


@pytest.mark.parametrize("role", sorted(EXPECTED))
@pytest.mark.parametrize("permission", ALL_PERMISSIONS)
def test_role_has(role, permission):
    assert role_has(role, permission) == (permission in EXPECTED[role])


def test_manager_cannot_manage_users_or_languages():
    assert not role_has("manager", "manage_users")
    assert not role_has("manager", "manage_languages")


@pytest.mark.parametrize("role", ["superuser", "", None, "Admin"])
def test_unknown_role_has_no_permissions(role):
    assert permissions_for(role) == frozenset()
    assert not role_has(role, "view")


def test_table_is_read_only():
    with pytest.raises(TypeError):
        ROLE_PERMISSIONS["viewer"] = frozenset(ALL_PERMISSIONS)
    with pytest.raises(AttributeError):
        permissions_for("viewer").add("translate")


def test_normalize_permissions_resolves_alias_and_flags_unknown():
    valid, invalid = normalize_permissions(["view", "manage_keys", "view", "fly"])
    assert valid == ["view", "manage_translations"]
    assert invalid == ["fly"]


def test_ordered_follows_vocabulary_order():
    assert ordered({"manage_users", "view", "review"}) == ["view", "review", "manage_users"]
