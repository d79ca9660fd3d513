import sqlite3

from flask import current_app, g


def connect(path):
    db = sqlite3.connect(path)
    db.row_factory = sqlite3.Row
    db.execute("PRAGMA foreign_keys = ON")
    return db


def get_db():
    if "db" not in g:
        g.db = connect(current_app.config["DATABASE"])
    return g.db


def close_db(e=None):
    db = g.pop("db", None)
    if db is not None:
        db.close()


def query_db(query, args=(), one=False):
    cur = get_db().execute(query, args)
    rv = cur.fetchall()
    cur.close()
    return (rv[0] if rv else None) if one else rv


def execute(query, args=()):
    """Run a single write statement and commit it.

    Rolls back and re-raises on failure so the shared connection is left
    usable for the rest of the request.
    """
    db = get_db()
    try:
        cursor = db.execute(query, args)
        db.commit()
    except sqlite3.Error:
        db.rollback()
        raise
    return cursor


def count(query, args=()):
    row = query_db(query, args, one=True)
    return row["count"] if row else 0


def init_app(app):
    app.teardown_appcontext(close_db)
