"""Record store factory functions."""

import os
from pathlib import Path
from typing import Optional

from lancamentos.store.sqlalchemy_store import SQLAlchemyRecordStore

DATABASE_URL_ENV = "LANCAMENTOS_DATABASE_URL"


def create_record_store(database_url: Optional[str] = None) -> SQLAlchemyRecordStore:
    """Create a record store instance.

    Args:
        database_url: SQLAlchemy URL of the table store. If None, checks the
            LANCAMENTOS_DATABASE_URL environment variable, then defaults to a
            SQLite file at ~/.lancamentos/lancamentos.db

    Returns:
        SQLAlchemyRecordStore instance
    """
    if database_url is None:
        database_url = os.environ.get(DATABASE_URL_ENV)

    if database_url is None:
        home = Path.home()
        db_dir = home / ".lancamentos"
        db_dir.mkdir(exist_ok=True)
        database_url = f"sqlite:///{db_dir / 'lancamentos.db'}"

    return SQLAlchemyRecordStore(database_url)


def create_sqlite_record_store(database_path: str) -> SQLAlchemyRecordStore:
    """Create a record store backed by a SQLite file."""
    return SQLAlchemyRecordStore(f"sqlite:///{database_path}")
