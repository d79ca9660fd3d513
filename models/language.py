from models.database import count, execute, query_db


class Language:
    def __init__(self, id, code, name, is_source, minecraft_head=None):
        self.id = id
        self.code = code
        self.name = name
        self.is_source = bool(is_source)
        self.minecraft_head = minecraft_head

    @staticmethod
    def from_row(row):
        if row is None:
            return None
        return Language(
            id=row["id"],
            code=row["code"],
            name=row["name"],
            is_source=row["is_source"],
            minecraft_head=row["minecraft_head"],
        )

    @staticmethod
    def create(code, name, is_source=False, minecraft_head=None):
        cursor = execute(
            "INSERT INTO languages (code, name, is_source, minecraft_head) "
            "VALUES (?, ?, ?, ?)",
            (code, name, 1 if is_source else 0, minecraft_head),
        )
        return cursor.lastrowid

    @staticmethod
    def get_by_id(language_id):
        row = query_db("SELECT * FROM languages WHERE id = ?", (language_id,), one=True)
        return Language.from_row(row)

    @staticmethod
    def get_by_code(code):
        row = query_db("SELECT * FROM languages WHERE code = ?", (code,), one=True)
        return Language.from_row(row)

    @staticmethod
    def get_all():
        rows = query_db("SELECT * FROM languages ORDER BY is_source DESC, name")
        return [Language.from_row(row) for row in rows]

    @staticmethod
    def update(language_id, code, name, is_source=False, minecraft_head=None):
        execute(
            "UPDATE languages SET code = ?, name = ?, is_source = ?, minecraft_head = ? "
            "WHERE id = ?",
            (code, name, 1 if is_source else 0, minecraft_head, language_id),
        )

    @staticmethod
    def delete(language_id):
        execute("DELETE FROM languages WHERE id = ?", (language_id,))

    @staticmethod
    def count_all():
        return count("SELECT COUNT(*) AS count FROM languages")
