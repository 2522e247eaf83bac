"""Abstract record store interface."""

from abc import ABC, abstractmethod
from typing import Any, Mapping

# Import entities directly to avoid circular import through domain/__init__.py
from lancamentos.domain.entities import Transaction


class RecordStore(ABC):
    """Remote table of transaction records.

    The store owns ``id``, ``created_at`` and ``updated_at``. Every method
    either returns the store's view of the affected record or raises
    ``StoreError`` (``NotFoundError`` for unknown ids).
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the store."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the store."""
        pass

    @abstractmethod
    def list_records(self) -> list[Transaction]:
        """List all records, most recent due date first."""
        pass

    @abstractmethod
    def insert(self, record: Mapping[str, Any]) -> Transaction:
        """Insert one record and return it with its assigned id and timestamps."""
        pass

    @abstractmethod
    def update(self, record_id: str, changes: Mapping[str, Any]) -> Transaction:
        """Update fields of a record and return the stored result."""
        pass

    @abstractmethod
    def delete(self, record_id: str) -> None:
        """Delete a record permanently."""
        pass
