"""Mapper functions to convert between domain models and SQLAlchemy models.

Enum members travel to the table as their plain string values and are
resolved back to members on the way out, so a row holding a value outside
the closed sets is rejected here instead of leaking into the domain.
"""

from enum import Enum
from typing import Any, Mapping

from lancamentos.domain import entities as domain
from lancamentos.store.models import Lancamento as ORMLancamento


def transaction_to_domain(orm_lancamento: ORMLancamento) -> domain.Transaction:
    """Convert SQLAlchemy Lancamento model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_lancamento.id,
        data_vencimento=orm_lancamento.data_vencimento,
        descricao=orm_lancamento.descricao,
        observacao=orm_lancamento.observacao or "",
        categoria=domain.Categoria(orm_lancamento.categoria),
        tipo=domain.Tipo(orm_lancamento.tipo),
        valor=orm_lancamento.valor,
        status=domain.Status(orm_lancamento.status),
        codigo_barras=orm_lancamento.codigo_barras or "",
        created_at=orm_lancamento.created_at,
        updated_at=orm_lancamento.updated_at,
    )


def record_to_columns(record: Mapping[str, Any]) -> dict[str, Any]:
    """Convert a domain field mapping into column values."""
    columns = {}
    for field, value in record.items():
        if isinstance(value, Enum):
            value = value.value
        columns[field] = value
    return columns
