"""
Database connection management.
Handles per-request connections, initialization, and teardown.
"""

import os
import sqlite3
import unicodedata
from datetime import datetime

from flask import g, current_app


# Timestamps are stored as ISO-8601 text and read back as naive datetimes
sqlite3.register_adapter(datetime, lambda value: value.isoformat(' '))
sqlite3.register_converter('TIMESTAMP', lambda raw: datetime.fromisoformat(raw.decode()))


def normalize_text(text):
    """
    Normalize text for case-insensitive matching beyond ASCII.
    Composes accents (NFC) and casefolds.

    Examples:
        'Émile' -> 'émile'
        'Østergaard' -> 'østergaard'
    """
    if text is None:
        return None
    return unicodedata.normalize('NFC', text).casefold()


def get_db():
    """
    Get the database connection for the current application context.

    The connection is opened on first use and closed by close_db()
    when the application context tears down.

    Returns:
        sqlite3.Connection: Database connection object
    """
    if 'db' not in g:
        db_path = current_app.config.get('DATABASE_PATH', 'instance/lunchly.db')
        db_dir = os.path.dirname(db_path)
        if db_path != ':memory:' and db_dir and not os.path.exists(db_dir):
            os.makedirs(db_dir)

        g.db = sqlite3.connect(
            db_path,
            detect_types=sqlite3.PARSE_DECLTYPES
        )
        g.db.row_factory = sqlite3.Row
        # Enable foreign key constraints
        g.db.execute('PRAGMA foreign_keys = ON')
        # Unicode-aware case folding for name search
        g.db.create_function('normalize', 1, normalize_text, deterministic=True)
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


def init_db(seed: bool = False):
    """
    Initialize database: drop existing tables and create the schema.
    WARNING: This will delete all existing data!

    Args:
        seed: Also insert the sample customers and reservations
    """
    from database.schema import drop_tables, create_tables, create_indexes
    from database.seed import seed_database

    db = get_db()

    # Drop existing tables (in reverse order of dependencies)
    drop_tables(db)

    # Create all tables
    create_tables(db)

    # Create indexes
    create_indexes(db)

    if seed:
        seed_database(db)

    db.commit()
    current_app.logger.info('Database initialized at %s', current_app.config.get('DATABASE_PATH'))
