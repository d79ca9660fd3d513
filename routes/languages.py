from flask import Blueprint, redirect, url_for

from forms.translation_forms import LanguageForm
from models.permission import MANAGE_LANGUAGES
from routes.access import permission_required
from services import languages
from views import flash_form_errors, redirect_with_result, render_view

languages_bp = Blueprint("languages", __name__)


@languages_bp.route("/languages")
@permission_required(MANAGE_LANGUAGES)
def index(identity):
    result = languages.list_languages(identity)
    return render_view("languages", languages=result.value)


@languages_bp.route("/languages/create", methods=["POST"])
@permission_required(MANAGE_LANGUAGES)
def create(identity):
    form = LanguageForm()
    if not form.validate_on_submit():
        flash_form_errors(form)
        return redirect(url_for("languages.index"))

    result = languages.create_language(identity, form.code.data, form.name.data,
                                       form.is_source.data, form.minecraft_head.data)
    return redirect_with_result(result, "language_created", url_for("languages.index"))


@languages_bp.route("/languages/<int:language_id>/update", methods=["POST"])
@permission_required(MANAGE_LANGUAGES)
def update(language_id, identity):
    form = LanguageForm()
    if not form.validate_on_submit():
        flash_form_errors(form)
        return redirect(url_for("languages.index"))

    result = languages.update_language(identity, language_id, form.code.data,
                                       form.name.data, form.is_source.data,
                                       form.minecraft_head.data)
    return redirect_with_result(result, "language_updated", url_for("languages.index"))


@languages_bp.route("/languages/<int:language_id>/delete", methods=["POST"])
@permission_required(MANAGE_LANGUAGES)
def delete(language_id, identity):
    result = languages.delete_language(identity, language_id)
    return redirect_with_result(result, "language_deleted", url_for("languages.index"))
