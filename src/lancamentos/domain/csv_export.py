"""CSV export of the filtered transaction list."""

from datetime import date
from typing import Iterable, Optional

from lancamentos.domain.entities import Transaction

CSV_HEADER = "Data Vencimento,Descrição,Observação,Categoria,Tipo,Valor,Status,Código de Barras"


def _quote(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


def transaction_to_row(transaction: Transaction) -> str:
    """Render one transaction as a CSV line.

    Text fields are always quoted; the due date and the amount are not.
    """
    return ",".join(
        [
            transaction.data_vencimento.isoformat(),
            _quote(transaction.descricao),
            _quote(transaction.observacao),
            _quote(transaction.categoria.value),
            _quote(transaction.tipo.value),
            f"{transaction.valor:.2f}",
            _quote(transaction.status.value),
            _quote(transaction.codigo_barras),
        ]
    )


def export_csv(transactions: Iterable[Transaction]) -> str:
    """Render transactions as CSV text, header first."""
    lines = [CSV_HEADER]
    lines.extend(transaction_to_row(transaction) for transaction in transactions)
    return "\n".join(lines)


def export_filename(day: Optional[date] = None) -> str:
    """File name for an export made on ``day`` (today by default)."""
    day = day or date.today()
    return f"lancamentos_{day.isoformat()}.csv"
