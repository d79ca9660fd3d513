from flask import Blueprint, current_app, redirect, url_for

from forms.translation_forms import ApiKeyForm
from models.permission import ALL_PERMISSIONS
from routes.access import session_required
from services import accounts
from views import flash_form_errors, redirect_with_result, render_view

api_keys_bp = Blueprint("api_keys", __name__)


@api_keys_bp.route("/api-keys")
@session_required
def index(identity):
    result = accounts.list_api_keys(identity)
    return render_view("api-keys", api_keys=result.value,
                       available_permissions=list(ALL_PERMISSIONS))


@api_keys_bp.route("/api-keys/create", methods=["POST"])
@session_required
def create(identity):
    form = ApiKeyForm()
    if not form.validate_on_submit():
        flash_form_errors(form)
        return redirect(url_for("api_keys.index"))

    result = accounts.create_api_key(
        identity, form.name.data, form.permissions.data,
        clamp_to_role=current_app.config["API_KEY_CLAMP_TO_ROLE"],
        prefix=current_app.config["API_KEY_PREFIX"],
    )
    return redirect_with_result(result, "api_key_created", url_for("api_keys.index"))


@api_keys_bp.route("/api-keys/<int:key_id>/delete", methods=["POST"])
@session_required
def delete(key_id, identity):
    result = accounts.delete_api_key(identity, key_id)
    return redirect_with_result(result, "api_key_deleted", url_for("api_keys.index"))
