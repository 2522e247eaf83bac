"""User-facing notifications emitted by ledger operations."""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class Notification:
    """A transient message for the user (a toast in a graphical screen)."""

    title: str
    description: str
    variant: str = "default"

    @property
    def is_destructive(self) -> bool:
        return self.variant == "destructive"


class Notifier(Protocol):
    def __call__(self, notification: Notification) -> None:
        """Show a notification to the user."""


def _error(description: str) -> Notification:
    return Notification("Erro", description, "destructive")


LOAD_FAILED = Notification(
    "Erro ao carregar dados", "Não foi possível carregar os lançamentos", "destructive"
)
CREATED = Notification("Novo Lançamento", "Lançamento criado com sucesso")
CREATE_FAILED = _error("Não foi possível criar o lançamento")
UPDATED = Notification("Lançamento Atualizado", "As alterações foram salvas com sucesso")
UPDATE_FAILED = _error("Não foi possível atualizar o lançamento")
DELETED = Notification(
    "Lançamento Excluído", "O lançamento foi removido permanentemente", "destructive"
)
DELETE_FAILED = _error("Não foi possível excluir o lançamento")
MARKED_PAID = Notification("Status Atualizado", "Lançamento marcado como fechado")
MARK_PAID_FAILED = _error("Não foi possível atualizar o status")
EXPORTED = Notification("Exportar CSV", "Download iniciado com sucesso")
BARCODE_COPIED = Notification(
    "Código copiado", "Código de barras copiado para a área de transferência"
)
BARCODE_COPY_FAILED = Notification(
    "Erro ao copiar", "Não foi possível copiar o código de barras", "destructive"
)


def discard(notification: Notification) -> None:
    """Notifier that drops every notification."""
