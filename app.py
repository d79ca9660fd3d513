import logging
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from flask import Flask, jsonify, redirect, request, session
from flask_login import LoginManager
from flask_wtf.csrf import CSRFProtect
from werkzeug.exceptions import HTTPException

from config import Config
from messages import get_translator
from models.database import init_app as init_db_app
from models.user import User


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Extensions
    csrf = CSRFProtect(app)
    login_manager = LoginManager(app)
    login_manager.login_view = "auth.login"
    login_manager.login_message = get_translator("en")("login_required")
    login_manager.login_message_category = "warning"

    @login_manager.user_loader
    def load_user(user_id):
        return User.get_by_id(int(user_id))

    # Database teardown
    init_db_app(app)

    @app.route("/set-language/<lang>")
    def set_language(lang):
        if lang in app.config["SUPPORTED_LANGUAGES"]:
            session["lang"] = lang
        return redirect(request.referrer or "/")

    # Blueprints
    from routes.auth import auth_bp
    from routes.translations import translations_bp
    from routes.api_keys import api_keys_bp
    from routes.languages import languages_bp
    from routes.admin import admin_bp
    from routes.api import api_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(translations_bp)
    app.register_blueprint(api_keys_bp)
    app.register_blueprint(languages_bp)
    app.register_blueprint(admin_bp)
    app.register_blueprint(api_bp, url_prefix="/api/v1")

    # API clients authenticate with keys, not cookies
    csrf.exempt(api_bp)

    # Error handlers
    @app.errorhandler(HTTPException)
    def http_error(e):
        return jsonify({"error": e.name, "message": e.description}), e.code

    return app


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = create_app()
    app.run(debug=True, use_reloader=False)
