"""Record store layer for lancamentos."""

from lancamentos.store.base import RecordStore
from lancamentos.store.factories import create_record_store, create_sqlite_record_store

__all__ = ["RecordStore", "create_record_store", "create_sqlite_record_store"]
