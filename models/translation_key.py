from models.database import count, execute, query_db


class TranslationKey:
    def __init__(self, id, key, description, context, created_at, created_by):
        self.id = id
        self.key = key
        self.description = description
        self.context = context
        self.created_at = created_at
        self.created_by = created_by

    @staticmethod
    def from_row(row):
        if row is None:
            return None
        return TranslationKey(
            id=row["id"],
            key=row["key"],
            description=row["description"],
            context=row["context"],
            created_at=row["created_at"],
            created_by=row["created_by"],
        )

    @staticmethod
    def create(key, description, context, created_by):
        cursor = execute(
            "INSERT INTO translation_keys (key, description, context, created_by) "
            "VALUES (?, ?, ?, ?)",
            (key, description, context, created_by),
        )
        return cursor.lastrowid

    @staticmethod
    def get_by_id(key_id):
        row = query_db("SELECT * FROM translation_keys WHERE id = ?", (key_id,), one=True)
        return TranslationKey.from_row(row)

    @staticmethod
    def get_all(limit=None):
        """Keys newest first, with creator name and translation counts."""
        query = (
            "SELECT tk.*, u.username AS created_by_name, "
            "(SELECT COUNT(*) FROM translations t WHERE t.key_id = tk.id) AS translation_count, "
            "(SELECT COUNT(*) FROM translations t WHERE t.key_id = tk.id "
            "AND t.status = 'approved') AS approved_count "
            "FROM translation_keys tk "
            "LEFT JOIN users u ON tk.created_by = u.id "
            "ORDER BY tk.created_at DESC, tk.id DESC"
        )
        if limit is not None:
            return query_db(query + " LIMIT ?", (limit,))
        return query_db(query)

    @staticmethod
    def delete(key_id):
        execute("DELETE FROM translation_keys WHERE id = ?", (key_id,))

    @staticmethod
    def count_all():
        return count("SELECT COUNT(*) AS count FROM translation_keys")
