import json

from models.database import count, execute, query_db


class ApiKey:
    def __init__(self, id, user_id, key, name, permissions, created_at, last_used):
        self.id = id
        self.user_id = user_id
        self.key = key
        self.name = name
        self.permissions = permissions
        self.created_at = created_at
        self.last_used = last_used

    @staticmethod
    def from_row(row):
        if row is None:
            return None
        return ApiKey(
            id=row["id"],
            user_id=row["user_id"],
            key=row["key"],
            name=row["name"],
            permissions=json.loads(row["permissions"]),
            created_at=row["created_at"],
            last_used=row["last_used"],
        )

    @staticmethod
    def create(user_id, key, name, permissions):
        cursor = execute(
            "INSERT INTO api_keys (user_id, key, name, permissions) VALUES (?, ?, ?, ?)",
            (user_id, key, name, json.dumps(list(permissions))),
        )
        return cursor.lastrowid

    @staticmethod
    def get_by_id(key_id):
        row = query_db("SELECT * FROM api_keys WHERE id = ?", (key_id,), one=True)
        return ApiKey.from_row(row)

    @staticmethod
    def find_by_token(token):
        row = query_db("SELECT * FROM api_keys WHERE key = ?", (token,), one=True)
        return ApiKey.from_row(row)

    @staticmethod
    def get_by_user(user_id):
        rows = query_db(
            "SELECT * FROM api_keys WHERE user_id = ? ORDER BY created_at DESC, id DESC",
            (user_id,),
        )
        return [ApiKey.from_row(row) for row in rows]

    @staticmethod
    def delete(key_id, user_id):
        """Delete a key only if it belongs to ``user_id``. Returns True if removed."""
        cursor = execute("DELETE FROM api_keys WHERE id = ? AND user_id = ?",
                         (key_id, user_id))
        return cursor.rowcount > 0

    @staticmethod
    def touch_last_used(key_id):
        execute("UPDATE api_keys SET last_used = CURRENT_TIMESTAMP WHERE id = ?",
                (key_id,))

    @staticmethod
    def count_all():
        return count("SELECT COUNT(*) AS count FROM api_keys")
