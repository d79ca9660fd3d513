"""View decorators that run the guards before a route body executes.

Browser routes resolve the caller from the session, API routes from the
presented API key; a route never consults both. The resolved identity is
passed to the view as the ``identity`` keyword argument.
"""
from functools import wraps

from flask import current_app, request, session

from services import auth
from services.guards import require_permission, require_role
from views import error_response


def _unauthorized():
    return current_app.login_manager.unauthorized()


def session_required(view):
    @wraps(view)
    def wrapped(*args, **kwargs):
        resolved = auth.resolve_session(session)
        if not resolved.ok:
            return _unauthorized()
        return view(*args, identity=resolved.value, **kwargs)
    return wrapped


def role_required(*roles):
    allowed_roles = frozenset(roles)

    def decorator(view):
        @wraps(view)
        def wrapped(*args, **kwargs):
            resolved = auth.resolve_session(session)
            if not resolved.ok:
                return _unauthorized()
            checked = require_role(resolved.value, allowed_roles)
            if not checked.ok:
                return error_response(checked.error)
            return view(*args, identity=resolved.value, **kwargs)
        return wrapped
    return decorator


def permission_required(*permissions):
    def decorator(view):
        @wraps(view)
        def wrapped(*args, **kwargs):
            resolved = auth.resolve_session(session)
            if not resolved.ok:
                return _unauthorized()
            checked = require_permission(resolved.value, *permissions)
            if not checked.ok:
                return error_response(checked.error)
            return view(*args, identity=resolved.value, **kwargs)
        return wrapped
    return decorator


def api_key_required(*permissions):
    """Authenticate an API request by key and check the key's own grant."""
    def decorator(view):
        @wraps(view)
        def wrapped(*args, **kwargs):
            config = current_app.config
            token = auth.extract_api_token(request, config["API_KEY_HEADER"],
                                           config["API_KEY_QUERY_PARAM"])
            resolved = auth.resolve_api_key(token)
            if not resolved.ok:
                return error_response(resolved.error)
            checked = require_permission(resolved.value, *permissions)
            if not checked.ok:
                return error_response(checked.error)
            auth.mark_api_key_used(resolved.value)
            return view(*args, identity=resolved.value, **kwargs)
        return wrapped
    return decorator
