from flask import Blueprint, redirect, request, url_for

from forms.translation_forms import TranslateForm, TranslationKeyForm
from models.language import Language
from models.permission import MANAGE_TRANSLATIONS, REVIEW, TRANSLATE, ordered
from models.translation import Translation
from models.translation_key import TranslationKey
from routes.access import permission_required, session_required
from services import activity, workflow
from services.errors import not_found
from views import error_response, flash_form_errors, redirect_with_result, render_view

translations_bp = Blueprint("translations", __name__)


@translations_bp.route("/dashboard")
@session_required
def dashboard(identity):
    return render_view(
        "dashboard",
        current_user=identity._asdict(),
        permissions=ordered(identity.permissions),
        stats=workflow.statistics(),
        recent_activity=activity.recent(10),
        translation_keys=TranslationKey.get_all(limit=10),
    )


@translations_bp.route("/translations")
@session_required
def index(identity):
    return render_view(
        "translations",
        translation_keys=TranslationKey.get_all(),
        languages=Language.get_all(),
    )


@translations_bp.route("/translations/<int:key_id>")
@session_required
def detail(key_id, identity):
    key = TranslationKey.get_by_id(key_id)
    if key is None:
        return error_response(not_found("key_not_found").error)
    return render_view(
        "translation-detail",
        key=key,
        translations=Translation.get_for_key(key_id),
        languages=Language.get_all(),
    )


@translations_bp.route("/translations/create", methods=["POST"])
@permission_required(MANAGE_TRANSLATIONS)
def create(identity):
    form = TranslationKeyForm()
    if not form.validate_on_submit():
        flash_form_errors(form)
        return redirect(url_for("translations.index"))

    result = workflow.create_key(identity, form.key.data, form.description.data,
                                 form.context.data)
    return redirect_with_result(result, "key_created", url_for("translations.index"))


@translations_bp.route("/translations/<int:key_id>/translate", methods=["POST"])
@permission_required(TRANSLATE)
def translate(key_id, identity):
    form = TranslateForm()
    if not form.validate_on_submit():
        flash_form_errors(form)
        return redirect(url_for("translations.detail", key_id=key_id))

    result = workflow.submit_translation(identity, key_id, form.language_id.data,
                                         form.value.data)
    return redirect_with_result(result, "translation_saved",
                                url_for("translations.detail", key_id=key_id))


@translations_bp.route("/translations/<int:translation_id>/approve", methods=["POST"])
@permission_required(REVIEW)
def approve(translation_id, identity):
    result = workflow.approve_translation(identity, translation_id)
    if result.ok:
        location = url_for("translations.detail", key_id=result.value.key_id)
    else:
        location = request.referrer or url_for("translations.index")
    return redirect_with_result(result, "translation_approved", location)


@translations_bp.route("/translations/<int:key_id>/delete", methods=["POST"])
@permission_required(MANAGE_TRANSLATIONS)
def delete(key_id, identity):
    result = workflow.delete_key(identity, key_id)
    return redirect_with_result(result, "key_deleted", url_for("translations.index"))
