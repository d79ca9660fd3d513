from flask_login import UserMixin

from models.database import count, execute, query_db
from models.permission import VIEWER


class User(UserMixin):
    def __init__(self, id, username, email, password_hash, role, is_active,
                 last_login, created_at):
        self.id = id
        self.username = username
        self.email = email
        self.password_hash = password_hash
        self.role = role
        self._is_active = is_active
        self.last_login = last_login
        self.created_at = created_at

    @property
    def is_active(self):
        return bool(self._is_active)

    @staticmethod
    def from_row(row):
        if row is None:
            return None
        return User(
            id=row["id"],
            username=row["username"],
            email=row["email"],
            password_hash=row["password_hash"],
            role=row["role"],
            is_active=row["is_active"],
            last_login=row["last_login"],
            created_at=row["created_at"],
        )

    @staticmethod
    def get_by_id(user_id):
        row = query_db("SELECT * FROM users WHERE id = ?", (user_id,), one=True)
        return User.from_row(row)

    @staticmethod
    def get_by_username(username):
        row = query_db("SELECT * FROM users WHERE username = ?", (username,), one=True)
        return User.from_row(row)

    @staticmethod
    def create(username, email, password_hash, role=VIEWER):
        cursor = execute(
            "INSERT INTO users (username, email, password_hash, role) "
            "VALUES (?, ?, ?, ?)",
            (username, email, password_hash, role),
        )
        return cursor.lastrowid

    @staticmethod
    def get_all():
        """All users with the number of API keys and translations they own."""
        return query_db(
            "SELECT u.id, u.username, u.email, u.role, u.is_active, u.last_login, "
            "u.created_at, "
            "COUNT(DISTINCT ak.id) AS api_key_count, "
            "COUNT(DISTINCT t.id) AS translation_count "
            "FROM users u "
            "LEFT JOIN api_keys ak ON u.id = ak.user_id "
            "LEFT JOIN translations t ON u.id = t.translated_by "
            "GROUP BY u.id ORDER BY u.created_at DESC, u.id DESC"
        )

    @staticmethod
    def update(user_id, **kwargs):
        allowed = {"username", "email", "role", "is_active", "password_hash"}
        fields = {k: v for k, v in kwargs.items() if k in allowed}
        if not fields:
            return
        set_clause = ", ".join(f"{k} = ?" for k in fields)
        values = list(fields.values()) + [user_id]
        execute(f"UPDATE users SET {set_clause} WHERE id = ?", values)

    @staticmethod
    def set_active(user_id, active):
        execute("UPDATE users SET is_active = ? WHERE id = ?",
                (1 if active else 0, user_id))

    @staticmethod
    def touch_last_login(user_id):
        execute("UPDATE users SET last_login = CURRENT_TIMESTAMP WHERE id = ?",
                (user_id,))

    @staticmethod
    def delete(user_id):
        execute("DELETE FROM users WHERE id = ?", (user_id,))

    @staticmethod
    def get_stats(user_id):
        row = query_db(
            "SELECT "
            "(SELECT COUNT(*) FROM translations WHERE translated_by = ?) AS translations_created, "
            "(SELECT COUNT(*) FROM translations WHERE reviewed_by = ?) AS translations_reviewed, "
            "(SELECT COUNT(*) FROM translation_keys WHERE created_by = ?) AS keys_created, "
            "(SELECT COUNT(*) FROM api_keys WHERE user_id = ?) AS api_keys_count",
            (user_id, user_id, user_id, user_id), one=True,
        )
        return dict(row)

    @staticmethod
    def count_all():
        return count("SELECT COUNT(*) AS count FROM users")

    @staticmethod
    def count_active():
        return count("SELECT COUNT(*) AS count FROM users WHERE is_active = 1")

    @staticmethod
    def count_by_role():
        rows = query_db("SELECT role, COUNT(*) AS count FROM users GROUP BY role")
        return {row["role"]: row["count"] for row in rows}
