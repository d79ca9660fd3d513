"""Authorization guards.

Each guard takes a resolved identity (or ``None``) and returns a ``Result``
holding the identity when the check passes. Guards never write anything.
"""
import logging

from services.errors import Result, forbidden, unauthenticated
from services.identity import API_KEY

logger = logging.getLogger(__name__)

ROLE_CHANGE = "role_change"
DEACTIVATE = "deactivate"
DELETE = "delete"


def require_authenticated(identity):
    if identity is None:
        return unauthenticated("login_required")
    return Result.success(identity)


def require_role(identity, allowed_roles):
    result = require_authenticated(identity)
    if not result.ok:
        return result
    if identity.role not in allowed_roles:
        logger.debug("Role %s denied, needs one of %s", identity.role, sorted(allowed_roles))
        return forbidden("forbidden")
    return result


def require_permission(identity, *permissions):
    """Pass only if the identity holds every permission listed.

    Session callers derive their permissions from their role; API callers
    from the key's stored grant, whatever the owner's role is now.
    """
    result = require_authenticated(identity)
    if not result.ok:
        return result
    granted = identity.permissions
    if all(perm in granted for perm in permissions):
        return result
    if identity.kind == API_KEY:
        return forbidden(
            "insufficient_permissions",
            detail_code="insufficient_permissions_detail",
            required=list(permissions),
            granted=list(identity.granted_permissions),
        )
    return forbidden("permission_denied", required=list(permissions))


def check_self_modification(identity, target_user_id, action):
    """Refuse role changes, deactivation or deletion of the caller's own account.

    ``action`` is one of ``ROLE_CHANGE``, ``DEACTIVATE``, ``DELETE`` or
    ``None`` for edits that touch none of them.
    """
    if action is not None and int(target_user_id) == identity.acting_user_id:
        return forbidden("self_modification", action=action)
    return Result.success(identity)
