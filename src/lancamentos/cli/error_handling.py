"""CLI error handling helpers."""

import click

from lancamentos.domain.errors import DomainError, FormValidationError
from lancamentos.domain.form import FIELD_LABELS


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def handle_form_error(ctx: click.Context, error: FormValidationError) -> None:
    """Render one line per invalid form field and exit with failure."""
    click.echo("Error: Invalid form fields", err=True)
    for field, message in error.errors.items():
        click.echo(f"  {FIELD_LABELS.get(field, field)}: {message}", err=True)
    ctx.exit(1)
