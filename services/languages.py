import logging
import sqlite3

from models.language import Language
from models.permission import MANAGE_LANGUAGES, VIEW
from services import activity
from services.errors import Result, conflict, invalid, not_found
from services.guards import require_permission

logger = logging.getLogger(__name__)


def list_languages(identity):
    allowed = require_permission(identity, VIEW)
    if not allowed.ok:
        return allowed
    return Result.success(Language.get_all())


def get_language(identity, code):
    allowed = require_permission(identity, VIEW)
    if not allowed.ok:
        return allowed
    language = Language.get_by_code(code)
    if language is None:
        return not_found("language_not_found")
    return Result.success(language)


def create_language(identity, code, name, is_source=False, minecraft_head=None):
    allowed = require_permission(identity, MANAGE_LANGUAGES)
    if not allowed.ok:
        return allowed

    if not isinstance(code, str) or not isinstance(name, str):
        return invalid("language_fields_required")
    if not _optional_text(minecraft_head):
        return invalid("invalid_request")
    code = code.strip()
    name = name.strip()
    if not code or not name:
        return invalid("language_fields_required")

    try:
        language_id = Language.create(code, name, bool(is_source), minecraft_head or None)
    except sqlite3.IntegrityError as exc:
        logger.warning("Could not create language %r: %s", code, exc)
        return conflict("language_exists")

    activity.record(identity.acting_user_id, "create_language",
                    f"Created language: {name} ({code})")
    return Result.success(Language.get_by_id(language_id))


def update_language(identity, language, code, name, is_source=False, minecraft_head=None):
    """Update a language looked up by id or by its current code."""
    allowed = require_permission(identity, MANAGE_LANGUAGES)
    if not allowed.ok:
        return allowed

    current = _lookup(language)
    if current is None:
        return not_found("language_not_found")
    if not isinstance(name, str) or not name.strip():
        return invalid("name_required")
    if not _optional_text(code) or not _optional_text(minecraft_head):
        return invalid("invalid_request")
    code = (code or current.code).strip()
    name = name.strip()

    try:
        Language.update(current.id, code, name, bool(is_source), minecraft_head or None)
    except sqlite3.IntegrityError as exc:
        logger.warning("Could not update language %s: %s", current.id, exc)
        return conflict("language_exists")

    activity.record(identity.acting_user_id, "update_language", f"Updated language: {name}")
    return Result.success(Language.get_by_id(current.id))


def delete_language(identity, language):
    """Delete a language together with all of its translations."""
    allowed = require_permission(identity, MANAGE_LANGUAGES)
    if not allowed.ok:
        return allowed

    current = _lookup(language)
    if current is None:
        return not_found("language_not_found")

    Language.delete(current.id)
    activity.record(identity.acting_user_id, "delete_language",
                    f"Deleted language: {current.name}")
    return Result.success(current)


def _lookup(language):
    if isinstance(language, int):
        return Language.get_by_id(language)
    return Language.get_by_code(language)


def _optional_text(value):
    return value is None or isinstance(value, str)
