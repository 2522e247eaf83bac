"""Domain layer for lancamentos application."""

from lancamentos.domain.entities import Categoria, Status, Tipo, Totals, Transaction, TransactionDraft
from lancamentos.domain.filters import TransactionFilter, aggregate, build_view, filter_transactions

__all__ = [
    "Categoria",
    "Status",
    "Tipo",
    "Totals",
    "Transaction",
    "TransactionDraft",
    "TransactionFilter",
    "aggregate",
    "build_view",
    "filter_transactions",
]
