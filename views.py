"""Response helpers shared by the blueprints.

Page routes hand their view-model to ``render_view``. No HTML templates are
shipped, so the view-model is returned as JSON together with any pending
flash messages.
"""
import sqlite3

from flask import current_app, flash, get_flashed_messages, jsonify, redirect, session

from messages import get_translator
from services.errors import ErrorKind


def translator():
    lang = session.get("lang", current_app.config.get("DEFAULT_LANGUAGE", "en"))
    return get_translator(lang)


def to_dict(obj):
    if obj is None:
        return None
    if isinstance(obj, sqlite3.Row):
        return dict(obj)
    if isinstance(obj, dict):
        return {k: to_dict(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [to_dict(item) for item in obj]
    if hasattr(obj, "__dict__"):
        data = {k.lstrip("_"): v for k, v in vars(obj).items() if k != "password_hash"}
        return data
    return obj


def render_view(view, status=200, **context):
    payload = {
        "view": view,
        "messages": [
            {"category": category, "message": message}
            for category, message in get_flashed_messages(with_categories=True)
        ],
    }
    payload.update({k: to_dict(v) for k, v in context.items()})
    return jsonify(payload), status


def error_response(error, t=None):
    """JSON body for a failed ``Result``: error, message, code and extras."""
    t = t or translator()
    detail_code = error.details.get("detail_code")
    body = {
        "error": t(error.code),
        "message": t(detail_code) if detail_code else t(error.code),
        "code": error.code,
    }
    for extra in ("required", "granted", "invalid", "action"):
        if extra in error.details:
            body[extra] = error.details[extra]
    return jsonify(body), error.status_code


def flash_result(result, success_code, t=None):
    """Flash the outcome of a service call for the next page the browser loads."""
    t = t or translator()
    if result.ok:
        flash(t(success_code), "success")
    else:
        flash(t(result.error.code), "danger")
    return result.ok


def flash_form_errors(form):
    for field_name, errors in form.errors.items():
        label = getattr(form, field_name).label.text
        for error in errors:
            flash(f"{label}: {error}", "danger")


def redirect_with_result(result, success_code, location):
    """Finish a browser form post.

    Denials are answered directly with 403; every other outcome is flashed
    and the browser is sent on to ``location``.
    """
    if not result.ok and result.error.kind is ErrorKind.FORBIDDEN:
        return error_response(result.error)
    flash_result(result, success_code)
    return redirect(location)
