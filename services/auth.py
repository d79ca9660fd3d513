"""Authentication: turns presented credentials into an identity.

Two schemes exist and a request only ever uses one of them. Browser routes
trust the identity stored in the session at login time; API routes look the
presented token up verbatim on every request.
"""
import logging

from werkzeug.security import check_password_hash

from models.api_key import ApiKey
from models.user import User
from services.errors import Result, unauthenticated
from services.identity import ApiKeyIdentity, SessionIdentity

logger = logging.getLogger(__name__)


def authenticate(username, password):
    """Check a username/password pair.

    Unknown usernames and wrong passwords fail identically. The deactivated
    check only runs once the password has matched, so a failed guess never
    reveals whether an account is disabled.
    """
    user = User.get_by_username(username) if username else None
    if user is None or not password or not check_password_hash(user.password_hash, password):
        logger.warning("Failed login attempt for username %r", username)
        return unauthenticated("invalid_credentials")
    if not user.is_active:
        logger.warning("Login attempt for deactivated account %r", username)
        return unauthenticated("account_deactivated")
    return Result.success(user)


def session_identity_for(user):
    return SessionIdentity(user.id, user.username, user.role)


def resolve_session(session):
    """Identity carried by the session cookie, without re-reading the user."""
    identity = SessionIdentity.from_session(session)
    if identity is None:
        return unauthenticated("login_required")
    return Result.success(identity)


def extract_api_token(request, header="X-API-Key", query_param="api_key"):
    return request.headers.get(header) or request.args.get(query_param)


def resolve_api_key(token):
    """Look up a presented API key token. The token is compared verbatim."""
    if not token:
        return unauthenticated("api_key_required",
                               detail_code="api_key_required_detail")
    api_key = ApiKey.find_by_token(token)
    if api_key is None:
        logger.warning("Rejected unknown API key")
        return unauthenticated("invalid_api_key",
                               detail_code="invalid_api_key_detail")
    return Result.success(ApiKeyIdentity.from_api_key(api_key))


def mark_api_key_used(identity):
    ApiKey.touch_last_used(identity.key_id)
