"""Transaction repository: the local cache kept in step with the record store."""

import logging
from typing import Any, Mapping, Optional

from lancamentos.domain import notifications
from lancamentos.domain.entities import (
    Status,
    Transaction,
    TransactionDraft,
    clean_changes,
)
from lancamentos.domain.errors import DomainError, NotFoundError, transaction_not_found
from lancamentos.domain.notifications import Notifier

logger = logging.getLogger(__name__)


class TransactionRepository:
    """Cached, ordered list of every transaction in the record store.

    The store is the source of truth: local state only changes after the
    store has acknowledged a request, and it is replaced by the record the
    store returned. Failures leave the cache as it was, notify the user and
    propagate to the caller.
    """

    def __init__(self, store, notifier: Optional[Notifier] = None):
        """Initialize transaction repository.

        Args:
            store: RecordStore instance
            notifier: Callable receiving user notifications; defaults to
                dropping them
        """
        self.store = store
        self.notify = notifier or notifications.discard
        self._records: dict[str, Transaction] = {}
        self._order: list[str] = []
        self.loaded = False

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        """Cached transactions in display order."""
        return tuple(self._records[record_id] for record_id in self._order)

    def __len__(self) -> int:
        return len(self._order)

    def __contains__(self, transaction_id: object) -> bool:
        return transaction_id in self._records

    def get(self, transaction_id: str) -> Optional[Transaction]:
        """Get a cached transaction by ID."""
        return self._records.get(transaction_id)

    def require(self, transaction_id: str) -> Transaction:
        """Get a cached transaction by ID.

        Raises:
            NotFoundError: If the transaction is not in the cache
        """
        transaction = self._records.get(transaction_id)
        if transaction is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        return transaction

    def load(self) -> tuple[Transaction, ...]:
        """Fetch every record, most recent due date first.

        Raises:
            DomainError: If the store fails; the previous cache is kept
        """
        try:
            records = self.store.list_records()
        except DomainError:
            logger.error("Error fetching transactions", exc_info=True)
            self.notify(notifications.LOAD_FAILED)
            raise

        self._records = {record.id: record for record in records}
        self._order = [record.id for record in records]
        self.loaded = True
        logger.info("Loaded %d transactions", len(self._order))
        return self.transactions

    def add(self, draft: TransactionDraft) -> Transaction:
        """Create a transaction and put it at the head of the list.

        Args:
            draft: Transaction payload without id or timestamps

        Returns:
            The transaction as stored, with its assigned id

        Raises:
            ValidationError: If the payload is invalid (nothing is sent)
            DomainError: If the store rejects the request
        """
        record = clean_changes(draft.to_record())
        try:
            created = self.store.insert(record)
        except DomainError:
            logger.error("Error adding transaction", exc_info=True)
            self.notify(notifications.CREATE_FAILED)
            raise

        self._records[created.id] = created
        self._order.insert(0, created.id)
        logger.info("Created transaction %s", created.id)
        self.notify(notifications.CREATED)
        return created

    def update(self, transaction_id: str, changes: Mapping[str, Any]) -> Transaction:
        """Update fields of a transaction, keeping its position in the list.

        Args:
            transaction_id: Transaction ID
            changes: Field name to new value, only the fields being changed

        Returns:
            The transaction as stored after the update

        Raises:
            ValidationError: If a change is invalid (nothing is sent)
            NotFoundError: If the store has no such transaction
            DomainError: If the store rejects the request
        """
        cleaned = clean_changes(dict(changes))
        try:
            updated = self.store.update(transaction_id, cleaned)
        except DomainError:
            logger.error("Error updating transaction %s", transaction_id, exc_info=True)
            self.notify(notifications.UPDATE_FAILED)
            raise

        self._replace(updated)
        logger.info("Updated transaction %s", transaction_id)
        self.notify(notifications.UPDATED)
        return updated

    def remove(self, transaction_id: str) -> None:
        """Delete a transaction permanently.

        Raises:
            NotFoundError: If the store has no such transaction
            DomainError: If the store rejects the request
        """
        try:
            self.store.delete(transaction_id)
        except DomainError:
            logger.error("Error deleting transaction %s", transaction_id, exc_info=True)
            self.notify(notifications.DELETE_FAILED)
            raise

        if self._records.pop(transaction_id, None) is not None:
            self._order.remove(transaction_id)
        logger.info("Deleted transaction %s", transaction_id)
        self.notify(notifications.DELETED)

    def mark_paid(self, transaction_id: str) -> Transaction:
        """Set a transaction's status to Fechado.

        Raises:
            NotFoundError: If the store has no such transaction
            DomainError: If the store rejects the request
        """
        try:
            updated = self.store.update(transaction_id, {"status": Status.FECHADO})
        except DomainError:
            logger.error("Error marking transaction %s as paid", transaction_id, exc_info=True)
            self.notify(notifications.MARK_PAID_FAILED)
            raise

        self._replace(updated)
        logger.info("Marked transaction %s as paid", transaction_id)
        self.notify(notifications.MARKED_PAID)
        return updated

    def _replace(self, transaction: Transaction) -> None:
        # Records unknown to the cache stay out of it; the next load picks them up
        if transaction.id in self._records:
            self._records[transaction.id] = transaction
