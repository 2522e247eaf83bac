"""Shared pytest fixtures for lancamentos tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal
import pytest

from lancamentos.domain.entities import Categoria, Status, Tipo, Transaction, TransactionDraft
from lancamentos.domain.errors import StoreError
from lancamentos.domain.repository import TransactionRepository
from lancamentos.store.base import RecordStore
from lancamentos.store.factories import create_sqlite_record_store


def make_transaction(**overrides) -> Transaction:
    """Build a Transaction entity without touching a store."""
    values = dict(
        id="t1",
        data_vencimento=date(2025, 9, 19),
        descricao="Loja",
        observacao="inss Ricardo",
        categoria=Categoria.CUSTO_FIXO,
        tipo=Tipo.SAIDA,
        valor=Decimal("334.00"),
        status=Status.ABERTO,
        codigo_barras="858700000030339603852526620716252417348212035901",
    )
    values.update(overrides)
    return Transaction(**values)


def make_draft(**overrides) -> TransactionDraft:
    values = dict(
        data_vencimento=date(2025, 9, 19),
        descricao="Loja",
        observacao="inss Ricardo",
        categoria=Categoria.CUSTO_FIXO,
        tipo=Tipo.SAIDA,
        valor=Decimal("334.00"),
        status=Status.ABERTO,
        codigo_barras="858700000030339603852526620716252417348212035901",
    )
    values.update(overrides)
    return TransactionDraft(**values)


class FlakyStore(RecordStore):
    """Store wrapper that fails every request while ``failing`` is set."""

    def __init__(self, inner: RecordStore):
        self.inner = inner
        self.failing = False
        self.calls: list[str] = []

    def _call(self, name, *args):
        self.calls.append(name)
        if self.failing:
            raise StoreError(f"network failure during {name}")
        return getattr(self.inner, name)(*args)

    def connect(self) -> None:
        self.inner.connect()

    def disconnect(self) -> None:
        self.inner.disconnect()

    def list_records(self):
        return self._call("list_records")

    def insert(self, record):
        return self._call("insert", record)

    def update(self, record_id, changes):
        return self._call("update", record_id, changes)

    def delete(self, record_id):
        return self._call("delete", record_id)


@pytest.fixture
def temp_store():
    """Create a temporary SQLite record store for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    store = create_sqlite_record_store(db_path)
    # Store the path for tests that need it
    store.database_path = db_path
    store.connect()

    yield store

    # Cleanup
    store.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def flaky_store(temp_store):
    return FlakyStore(temp_store)


@pytest.fixture
def notifications():
    """Notifications received by the repository, in order."""
    return []


@pytest.fixture
def repository(flaky_store, notifications):
    """Create a loaded TransactionRepository over a flaky temporary store."""
    repo = TransactionRepository(flaky_store, notifier=notifications.append)
    repo.load()
    return repo


@pytest.fixture
def sample_transactions(temp_store):
    """Insert the three sample bills plus one income and return them."""
    drafts = [
        make_draft(),
        make_draft(
            data_vencimento=date(2025, 9, 6),
            descricao="Casa",
            observacao="internet Caxias On-Line",
            valor=Decimal("90.00"),
            status=Status.FECHADO,
            codigo_barras="74891125372870230728233756661089511950000009999",
        ),
        make_draft(
            data_vencimento=date(2025, 9, 1),
            descricao="Casa",
            observacao="Ampla Saracuruna",
            valor=Decimal("97.00"),
            status=Status.FECHADO,
            codigo_barras="23792373049037000309840014860007111920000009767",
        ),
        make_draft(
            data_vencimento=date(2025, 9, 5),
            descricao="Salário",
            observacao="",
            categoria=Categoria.RECEITA,
            tipo=Tipo.RECEITA,
            valor=Decimal("2500.00"),
            status=Status.FECHADO,
            codigo_barras="",
        ),
    ]
    return [temp_store.insert(draft.to_record()) for draft in drafts]


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def loaded_repository(sample_transactions, repository, notifications):
    """Repository reloaded after the sample transactions were inserted."""
    repository.load()
    notifications.clear()
    return repository


@pytest.fixture
def transaction_factory():
    """Return the Transaction builder used by pure engine tests."""
    return make_transaction


@pytest.fixture
def draft_factory():
    """Return the TransactionDraft builder."""
    return make_draft
