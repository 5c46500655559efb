"""
Database connection management.
Handles per-request connections, initialization, and teardown.
"""

import sqlite3
import os
from flask import g, current_app


class PersistenceError(Exception):
    """Raised when the booking store fails to read or write."""


class DuplicateGrcError(PersistenceError):
    """Raised when an insert collides with an existing GRC number."""


def get_db():
    """
    Get thread-safe database connection with row factory.

    Returns:
        sqlite3.Connection: Database connection object
    """
    if 'db' not in g:
        db_path = current_app.config.get('DATABASE_PATH', 'instance/bookings.db')
        db_dir = os.path.dirname(db_path)
        if db_dir and not os.path.exists(db_dir):
            os.makedirs(db_dir, exist_ok=True)

        g.db = sqlite3.connect(
            db_path,
            detect_types=sqlite3.PARSE_DECLTYPES
        )
        g.db.row_factory = sqlite3.Row
        # Enable WAL mode for better concurrency
        g.db.execute('PRAGMA journal_mode = WAL')
    return g.db


def close_db(e=None):
    """
    Close database connection.

    Args:
        e: Exception if any (from Flask teardown context)
    """
    db = g.pop('db', None)
    if db is not None:
        db.close()


def init_db():
    """
    Initialize database: drop existing tables and create a fresh schema.
    WARNING: This will delete all existing data!
    """
    from database.schema import drop_tables, create_tables, create_indexes

    db = get_db()

    drop_tables(db)
    create_tables(db)
    create_indexes(db)

    db.commit()
    current_app.logger.info('Database initialized')


def ensure_schema():
    """Create the schema if it does not exist yet. Existing data is kept."""
    from database.schema import create_tables, create_indexes

    db = get_db()
    create_tables(db)
    create_indexes(db)
    db.commit()
