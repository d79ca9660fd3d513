from models.database import count, execute, query_db

PENDING = "pending"
APPROVED = "approved"


class Translation:
    def __init__(self, id, key_id, language_id, value, status, translated_by,
                 reviewed_by, updated_at):
        self.id = id
        self.key_id = key_id
        self.language_id = language_id
        self.value = value
        self.status = status
        self.translated_by = translated_by
        self.reviewed_by = reviewed_by
        self.updated_at = updated_at

    @staticmethod
    def from_row(row):
        if row is None:
            return None
        return Translation(
            id=row["id"],
            key_id=row["key_id"],
            language_id=row["language_id"],
            value=row["value"],
            status=row["status"],
            translated_by=row["translated_by"],
            reviewed_by=row["reviewed_by"],
            updated_at=row["updated_at"],
        )

    @staticmethod
    def get_by_id(translation_id):
        row = query_db("SELECT * FROM translations WHERE id = ?", (translation_id,), one=True)
        return Translation.from_row(row)

    @staticmethod
    def get_for_pair(key_id, language_id):
        row = query_db(
            "SELECT * FROM translations WHERE key_id = ? AND language_id = ?",
            (key_id, language_id), one=True,
        )
        return Translation.from_row(row)

    @staticmethod
    def upsert(key_id, language_id, value, translated_by):
        """Write the value of a (key, language) pair in a single statement.

        Any write puts the pair back into review: status becomes pending and
        the previous reviewer is cleared.
        """
        execute(
            "INSERT INTO translations (key_id, language_id, value, status, translated_by) "
            "VALUES (?, ?, ?, ?, ?) "
            "ON CONFLICT(key_id, language_id) DO UPDATE SET "
            "value = excluded.value, status = excluded.status, "
            "translated_by = excluded.translated_by, reviewed_by = NULL, "
            "updated_at = CURRENT_TIMESTAMP",
            (key_id, language_id, value, PENDING, translated_by),
        )
        return Translation.get_for_pair(key_id, language_id)

    @staticmethod
    def approve(translation_id, reviewed_by):
        """Approve a pending row. Returns False if it was not pending."""
        cursor = execute(
            "UPDATE translations SET status = ?, reviewed_by = ?, "
            "updated_at = CURRENT_TIMESTAMP WHERE id = ? AND status = ?",
            (APPROVED, reviewed_by, translation_id, PENDING),
        )
        return cursor.rowcount > 0

    @staticmethod
    def get_for_key(key_id):
        return query_db(
            "SELECT t.*, l.code AS lang_code, l.name AS lang_name, "
            "u1.username AS translated_by_name, u2.username AS reviewed_by_name "
            "FROM translations t "
            "JOIN languages l ON t.language_id = l.id "
            "LEFT JOIN users u1 ON t.translated_by = u1.id "
            "LEFT JOIN users u2 ON t.reviewed_by = u2.id "
            "WHERE t.key_id = ? ORDER BY l.is_source DESC, l.code",
            (key_id,),
        )

    @staticmethod
    def get_by_language(language_id):
        return query_db(
            "SELECT t.*, tk.key, tk.description FROM translations t "
            "JOIN translation_keys tk ON t.key_id = tk.id "
            "WHERE t.language_id = ? ORDER BY tk.key",
            (language_id,),
        )

    @staticmethod
    def count_for_key(key_id):
        return count("SELECT COUNT(*) AS count FROM translations WHERE key_id = ?", (key_id,))

    @staticmethod
    def count_all():
        return count("SELECT COUNT(*) AS count FROM translations")

    @staticmethod
    def count_by_status(status):
        return count("SELECT COUNT(*) AS count FROM translations WHERE status = ?", (status,))
