"""Filter and aggregation engine.

Everything here is a pure function of (transactions, filter) so a caller can
recompute the view whenever either input changes and always get the same
result for the same input.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from lancamentos.domain.entities import Categoria, Status, Tipo, Totals, Transaction
from lancamentos.utils.amount_parser import quantize_amount

ALL = "all"


@dataclass(frozen=True)
class TransactionFilter:
    """Filter specification.

    ``None`` in a choice field means "all". Date bounds are inclusive and a
    missing bound leaves that side of the range open.
    """

    search_term: str = ""
    categoria: Optional[Categoria] = None
    tipo: Optional[Tipo] = None
    status: Optional[Status] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    @classmethod
    def from_options(
        cls,
        search_term: Optional[str] = None,
        categoria: Optional[str] = None,
        tipo: Optional[str] = None,
        status: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> "TransactionFilter":
        """Build a filter from raw option values, where "all" is a wildcard.

        Raises:
            ValidationError: If a choice is outside its closed set
        """
        return cls(
            search_term=search_term or "",
            categoria=_choice(Categoria, categoria),
            tipo=_choice(Tipo, tipo),
            status=_choice(Status, status),
            start_date=start_date,
            end_date=end_date,
        )

    @property
    def is_wildcard(self) -> bool:
        return self == TransactionFilter()

    def matches(self, transaction: Transaction) -> bool:
        """Whether a transaction passes every predicate of this filter."""
        return (
            self._matches_search(transaction)
            and (self.categoria is None or transaction.categoria is self.categoria)
            and (self.tipo is None or transaction.tipo is self.tipo)
            and (self.status is None or transaction.status is self.status)
            and self._matches_dates(transaction.data_vencimento)
        )

    def _matches_search(self, transaction: Transaction) -> bool:
        if not self.search_term:
            return True
        needle = self.search_term.lower()
        return needle in transaction.descricao.lower() or needle in transaction.observacao.lower()

    def _matches_dates(self, due_date: date) -> bool:
        if self.start_date is not None and due_date < self.start_date:
            return False
        if self.end_date is not None and due_date > self.end_date:
            return False
        return True


@dataclass(frozen=True)
class TransactionView:
    """Filtered transactions and their totals."""

    transactions: tuple[Transaction, ...]
    totals: Totals


def _choice(enum_cls, value: Optional[str]):
    if value is None or str(value).strip().lower() in ("", ALL):
        return None
    return enum_cls.parse(value)


def filter_transactions(
    transactions: Iterable[Transaction], spec: TransactionFilter
) -> list[Transaction]:
    """Return the transactions passing ``spec``, keeping their order."""
    return [transaction for transaction in transactions if spec.matches(transaction)]


def aggregate(transactions: Sequence[Transaction]) -> Totals:
    """Sum income and expenses of a set of transactions.

    Returns:
        Totals with receitas, saidas, saldo (receitas - saidas) and counts
    """
    receitas = Decimal("0")
    saidas = Decimal("0")
    receitas_count = 0
    saidas_count = 0

    for transaction in transactions:
        if transaction.tipo is Tipo.RECEITA:
            receitas += transaction.valor
            receitas_count += 1
        elif transaction.tipo is Tipo.SAIDA:
            saidas += transaction.valor
            saidas_count += 1

    receitas = quantize_amount(receitas)
    saidas = quantize_amount(saidas)
    return Totals(
        receitas=receitas,
        saidas=saidas,
        saldo=receitas - saidas,
        total_transactions=len(transactions),
        receitas_count=receitas_count,
        saidas_count=saidas_count,
    )


def build_view(transactions: Iterable[Transaction], spec: TransactionFilter) -> TransactionView:
    """Filter transactions and aggregate the result in one step."""
    filtered = filter_transactions(transactions, spec)
    return TransactionView(transactions=tuple(filtered), totals=aggregate(filtered))
