from flask import Blueprint, redirect, request, url_for

from forms.admin_forms import UserAddForm, UserEditForm
from models.permission import ADMIN, ALL_ROLES
from routes.access import role_required
from services import accounts, activity
from views import error_response, flash_form_errors, redirect_with_result, render_view

admin_bp = Blueprint("admin", __name__)


@admin_bp.route("/admin")
@role_required(ADMIN)
def dashboard(identity):
    users = accounts.list_users(identity).value
    return render_view(
        "admin-dashboard",
        stats=accounts.admin_statistics(),
        users=users[:10],
        recent_activity=activity.recent(15),
    )


@admin_bp.route("/admin/activity")
@role_required(ADMIN)
def activity_log(identity):
    user_id = request.args.get("user_id", type=int)
    limit = min(request.args.get("limit", 50, type=int), 500)
    return render_view("activity-log",
                       activity=activity.recent(limit, actor_id=user_id),
                       filter_user_id=user_id, limit=limit)


@admin_bp.route("/users")
@role_required(ADMIN)
def users(identity):
    result = accounts.list_users(identity)
    return render_view("users", users=result.value, roles=list(ALL_ROLES))


@admin_bp.route("/users/<int:user_id>")
@role_required(ADMIN)
def user_detail(user_id, identity):
    result = accounts.user_detail(identity, user_id)
    if not result.ok:
        return error_response(result.error)
    return render_view("user-detail", **result.value)


@admin_bp.route("/users/create", methods=["POST"])
@role_required(ADMIN)
def user_create(identity):
    form = UserAddForm()
    if not form.validate_on_submit():
        flash_form_errors(form)
        return redirect(url_for("admin.users"))

    result = accounts.create_user(identity, form.username.data, form.email.data,
                                  form.password.data, form.role.data)
    return redirect_with_result(result, "user_created", url_for("admin.users"))


@admin_bp.route("/users/<int:user_id>/update", methods=["POST"])
@role_required(ADMIN)
def user_update(user_id, identity):
    form = UserEditForm()
    if not form.validate_on_submit():
        flash_form_errors(form)
        return redirect(url_for("admin.user_detail", user_id=user_id))

    result = accounts.update_user(identity, user_id, form.username.data, form.email.data,
                                  form.role.data, form.password.data)
    return redirect_with_result(result, "user_updated",
                                url_for("admin.user_detail", user_id=user_id))


@admin_bp.route("/users/<int:user_id>/role", methods=["POST"])
@role_required(ADMIN)
def user_role(user_id, identity):
    result = accounts.change_role(identity, user_id, request.form.get("role"))
    return redirect_with_result(result, "user_role_updated", url_for("admin.users"))


@admin_bp.route("/users/<int:user_id>/toggle-active", methods=["POST"])
@role_required(ADMIN)
def user_toggle_active(user_id, identity):
    result = accounts.toggle_active(identity, user_id)
    message = "user_activated"
    if result.ok and not result.value.is_active:
        message = "user_deactivated"
    return redirect_with_result(result, message, url_for("admin.users"))


@admin_bp.route("/users/<int:user_id>/delete", methods=["POST"])
@role_required(ADMIN)
def user_delete(user_id, identity):
    result = accounts.delete_user(identity, user_id)
    return redirect_with_result(result, "user_deleted", url_for("admin.users"))
