"""
Database package for the guest registration backend.

This package provides modular database operations:
- connection: Database connection management (get_db, close_db, init_db)
- schema: Table creation and indexes
"""

from database.connection import (
    get_db,
    close_db,
    init_db,
    ensure_schema,
    PersistenceError,
    DuplicateGrcError,
)
from database.schema import drop_tables, create_tables, create_indexes

__all__ = [
    # Connection
    'get_db',
    'close_db',
    'init_db',
    'ensure_schema',
    # Errors
    'PersistenceError',
    'DuplicateGrcError',
    # Schema
    'drop_tables',
    'create_tables',
    'create_indexes',
]
