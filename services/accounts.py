"""User administration and API key management."""
import logging
import sqlite3
import uuid

from werkzeug.security import generate_password_hash

from models.api_key import ApiKey
from models.language import Language
from models.permission import ADMIN, VIEWER, is_valid_role, normalize_permissions, permissions_for
from models.translation import APPROVED, PENDING, Translation
from models.translation_key import TranslationKey
from models.user import User
from services import activity
from services.errors import Result, conflict, forbidden, invalid, not_found
from services.guards import (DEACTIVATE, DELETE, ROLE_CHANGE, check_self_modification,
                             require_authenticated, require_role)

logger = logging.getLogger(__name__)

ADMIN_ONLY = frozenset((ADMIN,))


def _admin_action(identity, target_user_id=None, action=None):
    allowed = require_role(identity, ADMIN_ONLY)
    if not allowed.ok or target_user_id is None:
        return allowed
    return check_self_modification(identity, target_user_id, action)


# ---------------------------------------------------------------- users

def create_user(identity, username, email, password, role=None):
    allowed = _admin_action(identity)
    if not allowed.ok:
        return allowed

    username = (username or "").strip()
    email = (email or "").strip()
    if not username or not email or not password:
        return invalid("user_fields_required")
    role = role or VIEWER
    if not is_valid_role(role):
        return invalid("invalid_role")

    try:
        user_id = User.create(username, email, generate_password_hash(password), role)
    except sqlite3.IntegrityError as exc:
        logger.warning("Could not create user %r: %s", username, exc)
        return conflict("user_exists")

    logger.info("User %s created with role %s", username, role)
    activity.record(identity.acting_user_id, "create_user", f"Created user: {username}")
    return Result.success(User.get_by_id(user_id))


def update_user(identity, user_id, username, email, role, password=None):
    """Edit a user's profile. Admins may edit their own name and email only."""
    user = User.get_by_id(user_id)
    changes_role = user is not None and role != user.role
    allowed = _admin_action(identity, user_id, ROLE_CHANGE if changes_role else None)
    if not allowed.ok:
        return allowed
    if user is None:
        return not_found("user_not_found")

    username = (username or "").strip()
    email = (email or "").strip()
    if not username or not email:
        return invalid("user_fields_required")
    if not is_valid_role(role):
        return invalid("invalid_role")

    fields = {"username": username, "email": email, "role": role}
    if password:
        fields["password_hash"] = generate_password_hash(password)
    try:
        User.update(user.id, **fields)
    except sqlite3.IntegrityError as exc:
        logger.warning("Could not update user %s: %s", user.id, exc)
        return conflict("user_exists")

    details = f"Updated user: {username}"
    if password:
        details += ", password changed"
    activity.record(identity.acting_user_id, "update_user", details)
    return Result.success(User.get_by_id(user.id))


def change_role(identity, user_id, role):
    allowed = _admin_action(identity, user_id, ROLE_CHANGE)
    if not allowed.ok:
        return allowed
    if not is_valid_role(role):
        return invalid("invalid_role")
    user = User.get_by_id(user_id)
    if user is None:
        return not_found("user_not_found")

    User.update(user.id, role=role)
    activity.record(identity.acting_user_id, "update_role",
                    f"Changed user {user.id} role to {role}")
    return Result.success(User.get_by_id(user.id))


def toggle_active(identity, user_id):
    allowed = _admin_action(identity, user_id, DEACTIVATE)
    if not allowed.ok:
        return allowed
    user = User.get_by_id(user_id)
    if user is None:
        return not_found("user_not_found")

    User.set_active(user.id, not user.is_active)
    status = "deactivated" if user.is_active else "activated"
    activity.record(identity.acting_user_id, "toggle_user_active",
                    f"{status} user: {user.username}")
    return Result.success(User.get_by_id(user.id))


def delete_user(identity, user_id):
    allowed = _admin_action(identity, user_id, DELETE)
    if not allowed.ok:
        return allowed
    user = User.get_by_id(user_id)
    if user is None:
        return not_found("user_not_found")

    User.delete(user.id)
    logger.info("User %s deleted", user.username)
    activity.record(identity.acting_user_id, "delete_user", f"Deleted user: {user.username}")
    return Result.success(user)


def list_users(identity):
    allowed = _admin_action(identity)
    if not allowed.ok:
        return allowed
    return Result.success(User.get_all())


def user_detail(identity, user_id, activity_limit=10):
    allowed = _admin_action(identity)
    if not allowed.ok:
        return allowed
    user = User.get_by_id(user_id)
    if user is None:
        return not_found("user_not_found")
    return Result.success({
        "user": user,
        "stats": User.get_stats(user.id),
        "api_keys": ApiKey.get_by_user(user.id),
        "recent_activity": activity.recent(activity_limit, actor_id=user.id),
    })


def admin_statistics():
    by_role = User.count_by_role()
    return {
        "total_users": User.count_all(),
        "active_users": User.count_active(),
        "admin_count": by_role.get("admin", 0),
        "manager_count": by_role.get("manager", 0),
        "translator_count": by_role.get("translator", 0),
        "viewer_count": by_role.get("viewer", 0),
        "total_keys": TranslationKey.count_all(),
        "total_translations": Translation.count_all(),
        "approved_translations": Translation.count_by_status(APPROVED),
        "pending_translations": Translation.count_by_status(PENDING),
        "total_languages": Language.count_all(),
        "total_api_keys": ApiKey.count_all(),
    }


# ---------------------------------------------------------------- api keys

def generate_token(prefix="tk_"):
    return prefix + uuid.uuid4().hex


def create_api_key(identity, name, permissions, clamp_to_role=False, prefix="tk_"):
    """Mint a key for the caller with an explicit permission grant.

    The grant is independent of the caller's role unless ``clamp_to_role``
    is set, in which case it must not exceed what the role allows.
    """
    allowed = require_authenticated(identity)
    if not allowed.ok:
        return allowed

    name = (name or "").strip()
    if not name:
        return invalid("name_required")
    if isinstance(permissions, str):
        permissions = [permissions]
    granted, unknown = normalize_permissions(permissions or [])
    if unknown:
        return invalid("invalid_permission", invalid=unknown)
    if not granted:
        return invalid("permissions_required")
    if clamp_to_role and not set(granted) <= permissions_for(identity.role):
        return forbidden("api_key_over_scoped", required=granted)

    key_id = ApiKey.create(identity.acting_user_id, generate_token(prefix), name, granted)
    logger.info("API key %r minted for user %s", name, identity.acting_user_id)
    activity.record(identity.acting_user_id, "create_api_key", f"Created API key: {name}")
    return Result.success(ApiKey.get_by_id(key_id))


def list_api_keys(identity):
    allowed = require_authenticated(identity)
    if not allowed.ok:
        return allowed
    return Result.success(ApiKey.get_by_user(identity.acting_user_id))


def delete_api_key(identity, key_id):
    """Delete one of the caller's own keys. Other users' keys look absent."""
    allowed = require_authenticated(identity)
    if not allowed.ok:
        return allowed
    if not ApiKey.delete(key_id, identity.acting_user_id):
        return not_found("api_key_not_found")

    logger.info("API key %s deleted by user %s", key_id, identity.acting_user_id)
    activity.record(identity.acting_user_id, "delete_api_key", f"Deleted API key ID: {key_id}")
    return Result.success(key_id)
