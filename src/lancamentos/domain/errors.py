"""Shared domain error messages and error types."""

from typing import Mapping


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested transaction does not exist in the record store."""


class StoreError(DomainError):
    """The record store could not complete a request."""


class FormValidationError(ValidationError):
    """One or more form fields failed validation.

    ``errors`` maps each offending field name to the message shown next to it.
    """

    def __init__(self, errors: Mapping[str, str]):
        self.errors = dict(errors)
        fields = ", ".join(self.errors)
        super().__init__(f"Invalid fields: {fields}")


def transaction_not_found(transaction_id: str) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def invalid_choice(field: str, value: str, choices: list[str]) -> str:
    """Return message for a value outside a closed set."""
    return f"Invalid {field} '{value}'. Expected one of: {', '.join(choices)}"


def already_paid(transaction_id: str) -> str:
    """Return message when marking a closed transaction as paid."""
    return f"Transaction {transaction_id} is already closed"
