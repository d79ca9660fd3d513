from types import MappingProxyType

# Permission vocabulary, in display order. These strings are part of the API.
VIEW = "view"
TRANSLATE = "translate"
REVIEW = "review"
MANAGE_TRANSLATIONS = "manage_translations"
MANAGE_LANGUAGES = "manage_languages"
MANAGE_USERS = "manage_users"

ALL_PERMISSIONS = (VIEW, TRANSLATE, REVIEW, MANAGE_TRANSLATIONS,
                   MANAGE_LANGUAGES, MANAGE_USERS)

# Older clients submit "manage_keys" for key management.
PERMISSION_ALIASES = MappingProxyType({"manage_keys": MANAGE_TRANSLATIONS})

ADMIN = "admin"
MANAGER = "manager"
TRANSLATOR = "translator"
VIEWER = "viewer"

ALL_ROLES = (ADMIN, MANAGER, TRANSLATOR, VIEWER)

ROLE_PERMISSIONS = MappingProxyType({
    ADMIN: frozenset(ALL_PERMISSIONS),
    MANAGER: frozenset((MANAGE_TRANSLATIONS, REVIEW, TRANSLATE, VIEW)),
    TRANSLATOR: frozenset((TRANSLATE, VIEW)),
    VIEWER: frozenset((VIEW,)),
})


def permissions_for(role):
    """Permission set of a role. Unknown roles get an empty set."""
    return ROLE_PERMISSIONS.get(role, frozenset())


def role_has(role, permission):
    return permission in permissions_for(role)


def is_valid_role(role):
    return role in ROLE_PERMISSIONS


def ordered(permissions):
    """Sort permission tags into vocabulary order, dropping unknown ones."""
    granted = set(permissions)
    return [perm for perm in ALL_PERMISSIONS if perm in granted]


def normalize_permissions(permissions):
    """Resolve aliases and split a submitted list into (valid, invalid).

    Duplicates are dropped and submission order is kept.
    """
    valid = []
    invalid = []
    for perm in permissions:
        perm = PERMISSION_ALIASES.get(perm, perm)
        if perm in ALL_PERMISSIONS:
            if perm not in valid:
                valid.append(perm)
        else:
            invalid.append(perm)
    return valid, invalid
