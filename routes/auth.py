import logging

from flask import Blueprint, flash, redirect, request, session, url_for
from flask_login import login_user, logout_user

from forms.auth_forms import LoginForm
from models.user import User
from services import activity, auth
from views import render_view, translator

logger = logging.getLogger(__name__)

auth_bp = Blueprint("auth", __name__)


def _safe_next(target):
    if target and target.startswith("/") and not target.startswith("//"):
        return target
    return None


@auth_bp.route("/")
def index():
    if auth.resolve_session(session).ok:
        return redirect(url_for("translations.dashboard"))
    return redirect(url_for("auth.login"))


@auth_bp.route("/login", methods=["GET", "POST"])
def login():
    if auth.resolve_session(session).ok:
        return redirect(url_for("translations.dashboard"))

    form = LoginForm()
    if request.method == "GET":
        return render_view("login")

    t = translator()
    if not form.validate_on_submit():
        flash(t("invalid_credentials"), "danger")
        return redirect(url_for("auth.login"))

    result = auth.authenticate(form.username.data, form.password.data)
    if not result.ok:
        flash(t(result.error.code), "danger")
        return redirect(url_for("auth.login"))

    user = result.value
    session.clear()
    login_user(user)
    session.permanent = True
    auth.session_identity_for(user).to_session(session)

    User.touch_last_login(user.id)
    activity.record(user.id, "login", "User logged in")
    logger.info("User %s logged in", user.username)

    next_page = _safe_next(request.args.get("next"))
    return redirect(next_page or url_for("translations.dashboard"))


@auth_bp.route("/logout")
def logout():
    resolved = auth.resolve_session(session)
    if resolved.ok:
        activity.record(resolved.value.user_id, "logout", "User logged out")
    logout_user()
    session.clear()
    flash(translator()("logged_out"), "info")
    return redirect(url_for("auth.login"))
