from models.database import execute, query_db


class ActivityLog:
    @staticmethod
    def log(user_id, action, details=None):
        execute(
            "INSERT INTO activity_log (user_id, action, details) VALUES (?, ?, ?)",
            (user_id, action, details),
        )

    @staticmethod
    def get_recent(limit=20, user_id=None):
        conditions = []
        params = []
        if user_id is not None:
            conditions.append("al.user_id = ?")
            params.append(user_id)

        where = ""
        if conditions:
            where = "WHERE " + " AND ".join(conditions)

        return query_db(
            f"SELECT al.*, u.username FROM activity_log al "
            f"LEFT JOIN users u ON al.user_id = u.id "
            f"{where} ORDER BY al.created_at DESC, al.id DESC LIMIT ?",
            params + [limit],
        )
