"""Domain model entities for lancamentos.

These are pure data classes representing ledger entries, independent of the
record store schema. The closed sets (categoria, tipo, status) are enums so
that unknown values are rejected where data enters the system.
"""

from dataclasses import dataclass, asdict
from datetime import datetime, date
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Optional

from lancamentos.domain.errors import ValidationError, invalid_choice


class _ChoiceEnum(str, Enum):
    """String enum with a display label and tolerant parsing."""

    def __new__(cls, value: str, label: str):
        member = str.__new__(cls, value)
        member._value_ = value
        member.label = label
        return member

    def __str__(self) -> str:
        return self.value

    @classmethod
    def choices(cls) -> list[str]:
        return [member.value for member in cls]

    @classmethod
    def parse(cls, value: Any) -> "_ChoiceEnum":
        """Resolve a raw value or display label to a member.

        Raises:
            ValidationError: If the value is not part of the closed set
        """
        if isinstance(value, cls):
            return value
        text = str(value).strip().casefold()
        for member in cls:
            if text in (member.value.casefold(), member.label.casefold()):
                return member
        raise ValidationError(invalid_choice(cls._field_name(), str(value), cls.choices()))

    @classmethod
    def _field_name(cls) -> str:
        return cls.__name__.lower()


class Categoria(_ChoiceEnum):
    """Ledger category."""

    CUSTO_FIXO = ("Custo Fixo", "Custo Fixo")
    CUSTO_EXTRA = ("Custo Extra", "Custo Extra")
    RECEITA = ("Receita", "Receita")


class Tipo(_ChoiceEnum):
    """Direction of the money; amounts are always non-negative."""

    SAIDA = ("Saida", "Saída")
    RECEITA = ("Receita", "Receita")


class Status(_ChoiceEnum):
    """Payment status. Aberto is open/unpaid, Fechado is closed/paid."""

    ABERTO = ("Aberto", "Aberto")
    FECHADO = ("Fechado", "Fechado")


@dataclass(frozen=True)
class TransactionDraft:
    """Transaction payload before the store assigns id and timestamps."""

    data_vencimento: date
    descricao: str
    categoria: Categoria
    tipo: Tipo
    valor: Decimal
    status: Status = Status.ABERTO
    observacao: str = ""
    codigo_barras: str = ""

    def to_record(self) -> dict[str, Any]:
        """Return the payload as a field mapping for the record store."""
        return asdict(self)


@dataclass(frozen=True)
class Transaction:
    """Transaction (lançamento) domain entity."""

    id: str
    data_vencimento: date
    descricao: str
    observacao: str
    categoria: Categoria
    tipo: Tipo
    valor: Decimal
    status: Status
    codigo_barras: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_open(self) -> bool:
        """Whether the mark-as-paid action applies to this transaction."""
        return self.status is Status.ABERTO

    @property
    def has_barcode(self) -> bool:
        return bool(self.codigo_barras)


@dataclass(frozen=True)
class Totals:
    """Aggregated figures for a filtered set of transactions."""

    receitas: Decimal
    saidas: Decimal
    saldo: Decimal
    total_transactions: int
    receitas_count: int = 0
    saidas_count: int = 0


TRANSACTION_FIELDS = (
    "data_vencimento",
    "descricao",
    "observacao",
    "categoria",
    "tipo",
    "valor",
    "status",
    "codigo_barras",
)

_CHOICE_FIELDS = {"categoria": Categoria, "tipo": Tipo, "status": Status}


def clean_changes(changes: dict[str, Any]) -> dict[str, Any]:
    """Validate a partial field mapping before it is sent to the store.

    Closed-set fields are resolved to enum members, ``valor`` is checked to
    be a non-negative Decimal and ``descricao`` must not be blank.

    Raises:
        ValidationError: If a field is unknown or holds an invalid value
    """
    cleaned: dict[str, Any] = {}
    for field, value in changes.items():
        if field not in TRANSACTION_FIELDS:
            raise ValidationError(f"Unknown transaction field '{field}'")
        if field in _CHOICE_FIELDS:
            value = _CHOICE_FIELDS[field].parse(value)
        elif field == "valor":
            try:
                value = Decimal(str(value))
            except InvalidOperation as e:
                raise ValidationError(f"Invalid amount {value!r}") from e
            if not value.is_finite():
                raise ValidationError(f"Invalid amount {value!r}")
            if value < 0:
                raise ValidationError(f"Amount must not be negative: {value}")
        elif field == "data_vencimento":
            if not isinstance(value, date):
                raise ValidationError(f"Due date must be a date, got {value!r}")
        elif field == "descricao":
            if not str(value).strip():
                raise ValidationError("Description must not be empty")
        elif value is None:
            value = ""
        cleaned[field] = value
    return cleaned
