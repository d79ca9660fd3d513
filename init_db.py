import logging

from werkzeug.security import generate_password_hash

from config import Config
from models.database import connect

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS users (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    username TEXT UNIQUE NOT NULL,
    email TEXT UNIQUE NOT NULL,
    password_hash TEXT NOT NULL,
    role TEXT NOT NULL DEFAULT 'viewer',
    is_active INTEGER NOT NULL DEFAULT 1,
    last_login TIMESTAMP,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);

CREATE TABLE IF NOT EXISTS api_keys (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    user_id INTEGER NOT NULL,
    key TEXT UNIQUE NOT NULL,
    name TEXT NOT NULL,
    permissions TEXT NOT NULL,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    last_used TIMESTAMP,
    FOREIGN KEY (user_id) REFERENCES users(id) ON DELETE CASCADE
);

CREATE TABLE IF NOT EXISTS languages (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    code TEXT UNIQUE NOT NULL,
    name TEXT NOT NULL,
    is_source INTEGER NOT NULL DEFAULT 0,
    minecraft_head TEXT
);

CREATE TABLE IF NOT EXISTS translation_keys (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    key TEXT UNIQUE NOT NULL,
    description TEXT,
    context TEXT,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    created_by INTEGER,
    FOREIGN KEY (created_by) REFERENCES users(id) ON DELETE SET NULL
);

CREATE TABLE IF NOT EXISTS translations (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    key_id INTEGER NOT NULL,
    language_id INTEGER NOT NULL,
    value TEXT NOT NULL,
    status TEXT NOT NULL DEFAULT 'pending',
    translated_by INTEGER,
    reviewed_by INTEGER,
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    FOREIGN KEY (key_id) REFERENCES translation_keys(id) ON DELETE CASCADE,
    FOREIGN KEY (language_id) REFERENCES languages(id) ON DELETE CASCADE,
    FOREIGN KEY (translated_by) REFERENCES users(id) ON DELETE SET NULL,
    FOREIGN KEY (reviewed_by) REFERENCES users(id) ON DELETE SET NULL,
    UNIQUE(key_id, language_id)
);

CREATE TABLE IF NOT EXISTS activity_log (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    user_id INTEGER,
    action TEXT NOT NULL,
    details TEXT,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    FOREIGN KEY (user_id) REFERENCES users(id) ON DELETE SET NULL
);

CREATE INDEX IF NOT EXISTS idx_translations_key_lang ON translations(key_id, language_id);
CREATE INDEX IF NOT EXISTS idx_api_keys_key ON api_keys(key);
CREATE INDEX IF NOT EXISTS idx_activity_log_user ON activity_log(user_id);
"""

DEFAULT_LANGUAGES = [
    ("en", "English", 1),
    ("de", "Deutsch", 0),
    ("fr", "Français", 0),
    ("es", "Español", 0),
]


def init_db(database=None, admin_password=None, admin_email=None):
    database = database or Config.DATABASE
    admin_password = admin_password or Config.ADMIN_PASSWORD
    admin_email = admin_email or Config.ADMIN_EMAIL

    db = connect(database)
    try:
        db.executescript(SCHEMA)

        # Seed admin user if no admin exists yet
        cursor = db.execute("SELECT id FROM users WHERE role = 'admin' LIMIT 1")
        if cursor.fetchone() is None:
            db.execute(
                "INSERT INTO users (username, email, password_hash, role) "
                "VALUES (?, ?, ?, ?)",
                ("admin", admin_email, generate_password_hash(admin_password), "admin"),
            )
            db.commit()
            if admin_password == "admin123":
                logger.warning("Admin created with default password. "
                               "Set ADMIN_PASSWORD env var for production.")
            logger.info("Admin user created (username: admin)")

        cursor = db.execute("SELECT COUNT(*) AS count FROM languages")
        if cursor.fetchone()["count"] == 0:
            db.executemany(
                "INSERT INTO languages (code, name, is_source) VALUES (?, ?, ?)",
                DEFAULT_LANGUAGES,
            )
            db.commit()
            logger.info("Default languages added")
    finally:
        db.close()
    logger.info("Database initialized at %s", database)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_db()
