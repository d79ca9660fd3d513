import os
from datetime import timedelta

BASE_DIR = os.path.abspath(os.path.dirname(__file__))


def _env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key-change-in-production")
    DATABASE = os.environ.get("DATABASE", os.path.join(BASE_DIR, "translation.db"))

    # Sessions expire a fixed time after login; requests never extend them.
    PERMANENT_SESSION_LIFETIME = timedelta(days=7)
    SESSION_REFRESH_EACH_REQUEST = False
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = "Lax"

    API_KEY_HEADER = "X-API-Key"
    API_KEY_QUERY_PARAM = "api_key"
    API_KEY_PREFIX = "tk_"
    API_KEY_CLAMP_TO_ROLE = _env_flag("API_KEY_CLAMP_TO_ROLE")

    DEFAULT_LANGUAGE = "en"
    SUPPORTED_LANGUAGES = ("en", "de")

    ADMIN_PASSWORD = os.environ.get("ADMIN_PASSWORD", "admin123")
    ADMIN_EMAIL = os.environ.get("ADMIN_EMAIL", "admin@translation.local")
