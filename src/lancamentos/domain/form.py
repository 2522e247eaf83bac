"""Create/edit form validation.

Raw text typed by the user is checked here, field by field, before anything
reaches the repository. All problems are collected so each one can be shown
next to its field.
"""

from dataclasses import dataclass, fields
from decimal import Decimal
from typing import Any, Callable, Optional

from lancamentos.domain.entities import Categoria, Status, Tipo, TransactionDraft
from lancamentos.domain.errors import FormValidationError, ValidationError
from lancamentos.utils.amount_parser import parse_amount, quantize_amount
from lancamentos.utils.date_parser import parse_date

REQUIRED_MESSAGES = {
    "data_vencimento": "Data de vencimento é obrigatória",
    "descricao": "Descrição é obrigatória",
    "categoria": "Categoria é obrigatória",
    "tipo": "Tipo é obrigatório",
    "valor": "Valor é obrigatório",
    "status": "Status é obrigatório",
}

FIELD_LABELS = {
    "data_vencimento": "Data de Vencimento",
    "descricao": "Descrição",
    "observacao": "Observação",
    "categoria": "Categoria",
    "tipo": "Tipo",
    "valor": "Valor (R$)",
    "status": "Status",
    "codigo_barras": "Código de Barras",
}


def _parse_valor(raw: str) -> Decimal:
    try:
        amount = parse_amount(raw)
    except ValueError:
        raise ValidationError("Valor inválido")
    if amount < 0:
        raise ValidationError("Valor não pode ser negativo")
    return quantize_amount(amount)


def _parse_data(raw: str):
    try:
        return parse_date(raw)
    except ValueError:
        raise ValidationError("Data inválida")


def _parse_choice(enum_cls, message: str) -> Callable[[str], Any]:
    def parse(raw: str):
        try:
            return enum_cls.parse(raw)
        except ValidationError:
            raise ValidationError(message)

    return parse


def _parse_text(raw: str) -> str:
    return raw.strip()


_PARSERS: dict[str, Callable[[str], Any]] = {
    "data_vencimento": _parse_data,
    "descricao": _parse_text,
    "observacao": _parse_text,
    "categoria": _parse_choice(Categoria, "Categoria inválida"),
    "tipo": _parse_choice(Tipo, "Tipo inválido"),
    "valor": _parse_valor,
    "status": _parse_choice(Status, "Status inválido"),
    "codigo_barras": _parse_text,
}


@dataclass
class TransactionForm:
    """Raw field values of the create/edit form. ``None`` means untouched."""

    data_vencimento: Optional[str] = None
    descricao: Optional[str] = None
    observacao: Optional[str] = None
    categoria: Optional[str] = None
    tipo: Optional[str] = None
    valor: Optional[str] = None
    status: Optional[str] = None
    codigo_barras: Optional[str] = None

    def validate(self) -> TransactionDraft:
        """Validate every field for a new transaction.

        Returns:
            TransactionDraft ready for TransactionRepository.add

        Raises:
            FormValidationError: With one message per invalid field
        """
        values = dict(self._raw_values())
        if values.get("status") is None:
            values["status"] = Status.ABERTO.value

        parsed, errors = _parse_fields(values, require_all=True)
        if errors:
            raise FormValidationError(errors)
        return TransactionDraft(**parsed)

    def validate_changes(self) -> dict[str, Any]:
        """Validate only the fields that were filled in, for an edit.

        Returns:
            Mapping of changed field to parsed value

        Raises:
            FormValidationError: With one message per invalid field
        """
        values = {name: raw for name, raw in self._raw_values() if raw is not None}
        parsed, errors = _parse_fields(values, require_all=False)
        if errors:
            raise FormValidationError(errors)
        return parsed

    def _raw_values(self):
        for field in fields(self):
            yield field.name, getattr(self, field.name)


def _parse_fields(values: dict[str, Optional[str]], require_all: bool):
    parsed: dict[str, Any] = {}
    errors: dict[str, str] = {}

    for name, parser in _PARSERS.items():
        if name not in values:
            continue
        raw = values[name]
        if raw is None or not raw.strip():
            if name in REQUIRED_MESSAGES:
                if require_all or raw is not None:
                    errors[name] = REQUIRED_MESSAGES[name]
                continue
            parsed[name] = ""
            continue
        try:
            parsed[name] = parser(raw)
        except ValidationError as e:
            errors[name] = str(e)

    return parsed, errors
