"""Translation workflow.

A (key, language) pair moves from absent to pending when someone with
``translate`` writes a value, and from pending to approved when someone with
``review`` approves it. Writing to an approved pair sends it back to
pending. Values are overwritten in place; only the activity log remembers
that an edit happened.

Every operation checks its permission first and returns before touching the
database when the check fails.
"""
import logging
import sqlite3

from models.language import Language
from models.permission import MANAGE_TRANSLATIONS, REVIEW, TRANSLATE, VIEW
from models.translation import APPROVED, PENDING, Translation
from models.translation_key import TranslationKey
from models.user import User
from services import activity
from services.errors import Result, conflict, invalid, not_found
from services.guards import require_permission

logger = logging.getLogger(__name__)


def create_key(identity, key, description=None, context=None):
    allowed = require_permission(identity, MANAGE_TRANSLATIONS)
    if not allowed.ok:
        return allowed

    if not isinstance(key, str) or not key.strip():
        return invalid("key_required")
    if not _optional_text(description) or not _optional_text(context):
        return invalid("invalid_request")
    key = key.strip()

    try:
        key_id = TranslationKey.create(key, description or None, context or None,
                                       identity.acting_user_id)
    except sqlite3.IntegrityError as exc:
        logger.warning("Could not create translation key %r: %s", key, exc)
        return conflict("key_exists")

    activity.record(identity.acting_user_id, "create_key", f"Created translation key: {key}")
    return Result.success(TranslationKey.get_by_id(key_id))


def delete_key(identity, key_id):
    """Delete a key. Its translations go with it through the foreign key cascade."""
    allowed = require_permission(identity, MANAGE_TRANSLATIONS)
    if not allowed.ok:
        return allowed

    translation_key = TranslationKey.get_by_id(key_id)
    if translation_key is None:
        return not_found("key_not_found")

    removed = Translation.count_for_key(translation_key.id)
    TranslationKey.delete(translation_key.id)
    activity.record(identity.acting_user_id, "delete_key",
                    f"Deleted translation key: {translation_key.key} "
                    f"with {removed} translations")
    return Result.success(translation_key)


def submit_translation(identity, key_id, language, value):
    """Create or overwrite the value of a pair and (re)enter review.

    ``language`` is either a language id or a language code.
    """
    allowed = require_permission(identity, TRANSLATE)
    if not allowed.ok:
        return allowed

    if not isinstance(value, str) or not value.strip():
        return invalid("value_required")

    translation_key = TranslationKey.get_by_id(key_id)
    if translation_key is None:
        return not_found("key_not_found")

    lang = _find_language(language)
    if lang is None:
        return not_found("language_not_found")

    previous = Translation.get_for_pair(translation_key.id, lang.id)
    try:
        translation = Translation.upsert(translation_key.id, lang.id, value,
                                         identity.acting_user_id)
    except sqlite3.IntegrityError as exc:
        logger.warning("Could not save translation for key %s (%s): %s",
                       translation_key.id, lang.code, exc)
        return conflict("conflict")

    details = f"Updated translation for key ID: {translation_key.id} ({lang.code})"
    if previous is not None and previous.status == APPROVED:
        details += ", approval withdrawn"
    activity.record(identity.acting_user_id, "translate", details)
    return Result.success(translation)


def approve_translation(identity, translation_id):
    """Approve a pending translation, stamping the caller as reviewer."""
    allowed = require_permission(identity, REVIEW)
    if not allowed.ok:
        return allowed

    translation = Translation.get_by_id(translation_id)
    if translation is None:
        return not_found("translation_not_found")
    if translation.status == APPROVED:
        return conflict("already_approved")

    if not Translation.approve(translation.id, identity.acting_user_id):
        # Someone approved it between the read and the update.
        return conflict("already_approved")

    activity.record(identity.acting_user_id, "approve",
                    f"Approved translation ID: {translation.id}")
    return Result.success(Translation.get_by_id(translation.id))


def approve_pair(identity, key_id, language_code):
    allowed = require_permission(identity, REVIEW)
    if not allowed.ok:
        return allowed

    lang = Language.get_by_code(language_code)
    if lang is None:
        return not_found("language_not_found")
    translation = Translation.get_for_pair(key_id, lang.id)
    if translation is None:
        return not_found("translation_not_found")
    return approve_translation(identity, translation.id)


def translations_for_language(identity, language_code):
    """Flat ``{key: value}`` map of every translation in one language."""
    allowed = require_permission(identity, VIEW)
    if not allowed.ok:
        return allowed

    lang = Language.get_by_code(language_code)
    if lang is None:
        return not_found("language_not_found")
    rows = Translation.get_by_language(lang.id)
    return Result.success({row["key"]: row["value"] for row in rows})


def key_catalog(identity):
    """Every key with its translations nested by language code."""
    allowed = require_permission(identity, VIEW)
    if not allowed.ok:
        return allowed

    keys = []
    for row in TranslationKey.get_all():
        translations = {}
        for t in Translation.get_for_key(row["id"]):
            translations[t["lang_code"]] = {"value": t["value"], "status": t["status"]}
        keys.append({
            "id": row["id"],
            "key": row["key"],
            "description": row["description"],
            "context": row["context"],
            "translations": translations,
        })
    return Result.success(keys)


def statistics():
    return {
        "total_keys": TranslationKey.count_all(),
        "total_translations": Translation.count_all(),
        "approved_translations": Translation.count_by_status(APPROVED),
        "pending_translations": Translation.count_by_status(PENDING),
        "total_users": User.count_all(),
        "total_languages": Language.count_all(),
    }


def _find_language(language):
    if isinstance(language, int) or str(language).isdigit():
        return Language.get_by_id(int(language))
    return Language.get_by_code(language)


def _optional_text(value):
    return value is None or isinstance(value, str)
