from flask import Blueprint, jsonify, request

from models.api_key import ApiKey
from models.permission import MANAGE_LANGUAGES, MANAGE_TRANSLATIONS, REVIEW, TRANSLATE, VIEW
from models.user import User
from routes.access import api_key_required
from services import languages, workflow
from views import error_response

api_bp = Blueprint("api", __name__)


def language_to_dict(language, with_id=True):
    data = {
        "code": language.code,
        "name": language.name,
        "is_source": language.is_source,
        "minecraft_head": language.minecraft_head,
    }
    if with_id:
        data = {"id": language.id, **data}
    return data


def _json_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return {}
    return data


@api_bp.route("/translations/<lang_code>")
@api_key_required(VIEW)
def translations_for_language(lang_code, identity):
    result = workflow.translations_for_language(identity, lang_code)
    if not result.ok:
        return error_response(result.error)
    return jsonify({"language": lang_code, "translations": result.value})


@api_bp.route("/translations/<int:key_id>/<lang_code>", methods=["PUT"])
@api_key_required(TRANSLATE)
def update_translation(key_id, lang_code, identity):
    value = _json_body().get("value")
    result = workflow.submit_translation(identity, key_id, lang_code, value)
    if not result.ok:
        return error_response(result.error)
    translation = result.value
    return jsonify({
        "success": True,
        "key_id": key_id,
        "language": lang_code,
        "value": translation.value,
        "status": translation.status,
    })


@api_bp.route("/translations/<int:key_id>/<lang_code>/approve", methods=["POST"])
@api_key_required(REVIEW)
def approve_translation(key_id, lang_code, identity):
    result = workflow.approve_pair(identity, key_id, lang_code)
    if not result.ok:
        return error_response(result.error)
    translation = result.value
    return jsonify({
        "success": True,
        "key_id": key_id,
        "language": lang_code,
        "value": translation.value,
        "status": translation.status,
        "reviewed_by": translation.reviewed_by,
    })


@api_bp.route("/keys")
@api_key_required(VIEW)
def list_keys(identity):
    result = workflow.key_catalog(identity)
    if not result.ok:
        return error_response(result.error)
    langs = languages.list_languages(identity).value
    return jsonify({
        "keys": result.value,
        "languages": [language_to_dict(lang, with_id=False) for lang in langs],
    })


@api_bp.route("/keys", methods=["POST"])
@api_key_required(MANAGE_TRANSLATIONS)
def create_key(identity):
    data = _json_body()
    result = workflow.create_key(identity, data.get("key"), data.get("description"),
                                 data.get("context"))
    if not result.ok:
        return error_response(result.error)
    return jsonify({"success": True, "id": result.value.id, "key": result.value.key}), 201


@api_bp.route("/keys/<int:key_id>", methods=["DELETE"])
@api_key_required(MANAGE_TRANSLATIONS)
def delete_key(key_id, identity):
    result = workflow.delete_key(identity, key_id)
    if not result.ok:
        return error_response(result.error)
    return jsonify({"success": True, "message": "Translation key deleted successfully"})


@api_bp.route("/languages")
@api_key_required(VIEW)
def list_languages(identity):
    result = languages.list_languages(identity)
    return jsonify({"languages": [language_to_dict(lang) for lang in result.value]})


@api_bp.route("/languages/<code>")
@api_key_required(VIEW)
def get_language(code, identity):
    result = languages.get_language(identity, code)
    if not result.ok:
        return error_response(result.error)
    return jsonify(language_to_dict(result.value))


@api_bp.route("/languages", methods=["POST"])
@api_key_required(MANAGE_LANGUAGES)
def create_language(identity):
    data = _json_body()
    result = languages.create_language(identity, data.get("code"), data.get("name"),
                                       data.get("is_source"), data.get("minecraft_head"))
    if not result.ok:
        return error_response(result.error)
    return jsonify({"success": True, **language_to_dict(result.value)}), 201


@api_bp.route("/languages/<code>", methods=["PUT"])
@api_key_required(MANAGE_LANGUAGES)
def update_language(code, identity):
    data = _json_body()
    result = languages.update_language(identity, code, code, data.get("name"),
                                       data.get("is_source"), data.get("minecraft_head"))
    if not result.ok:
        return error_response(result.error)
    return jsonify({"success": True, **language_to_dict(result.value)})


@api_bp.route("/languages/<code>", methods=["DELETE"])
@api_key_required(MANAGE_LANGUAGES)
def delete_language(code, identity):
    result = languages.delete_language(identity, code)
    if not result.ok:
        return error_response(result.error)
    return jsonify({"success": True, "message": "Language deleted successfully"})


@api_bp.route("/me")
@api_key_required()
def me(identity):
    api_key = ApiKey.get_by_id(identity.key_id)
    owner = User.get_by_id(identity.owner_user_id)
    return jsonify({
        "key_id": identity.key_id,
        "name": identity.name,
        "owner": owner.username if owner else None,
        "permissions": list(identity.granted_permissions),
        "last_used": api_key.last_used if api_key else None,
    })
