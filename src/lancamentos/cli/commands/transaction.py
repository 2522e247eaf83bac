"""Per-transaction commands: show, edit, pay, delete and barcode."""

import click
from lancamentos.cli.error_handling import handle_domain_error, handle_form_error
from lancamentos.cli.rendering import echo_notification, echo_transaction_detail
from lancamentos.domain import notifications
from lancamentos.domain.errors import DomainError, FormValidationError, already_paid
from lancamentos.domain.form import TransactionForm


def _require(ctx, transaction_id: str):
    try:
        return ctx.obj["repository"].require(transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)


@click.command("show")
@click.argument("transaction_id")
@click.pass_context
def show_transaction(ctx, transaction_id: str) -> None:
    """Show every field of a transaction."""
    echo_transaction_detail(_require(ctx, transaction_id))


@click.command("edit")
@click.argument("transaction_id")
@click.option("--data", "data_vencimento", help="Due date (YYYY-MM-DD, DD/MM/YYYY or 'hoje')")
@click.option("--descricao", help="Description")
@click.option("--observacao", help="Additional details (empty string to clear)")
@click.option("--categoria", help="Category: Custo Fixo, Custo Extra or Receita")
@click.option("--tipo", help="Type: Saida or Receita")
@click.option("--valor", help="Amount in reais")
@click.option("--status", help="Status: Aberto or Fechado")
@click.option("--codigo-barras", help="Payment barcode (empty string to clear)")
@click.pass_context
def edit_transaction(
    ctx,
    transaction_id: str,
    data_vencimento: str | None,
    descricao: str | None,
    observacao: str | None,
    categoria: str | None,
    tipo: str | None,
    valor: str | None,
    status: str | None,
    codigo_barras: str | None,
) -> None:
    """Edit a transaction.

    Updates only the fields that are provided.

    Examples:
        lancamentos edit <id> --valor 97,50
        lancamentos edit <id> --status Aberto --observacao ""
    """
    repository = ctx.obj["repository"]

    form = TransactionForm(
        data_vencimento=data_vencimento,
        descricao=descricao,
        observacao=observacao,
        categoria=categoria,
        tipo=tipo,
        valor=valor,
        status=status,
        codigo_barras=codigo_barras,
    )
    try:
        changes = form.validate_changes()
    except FormValidationError as e:
        handle_form_error(ctx, e)

    if not changes:
        click.echo("Error: Nothing to update. Provide at least one field option.", err=True)
        ctx.exit(1)

    try:
        updated = repository.update(transaction_id, changes)
    except DomainError as e:
        handle_domain_error(ctx, e)

    echo_transaction_detail(updated)


@click.command("pay")
@click.argument("transaction_id")
@click.pass_context
def pay_transaction(ctx, transaction_id: str) -> None:
    """Mark an open transaction as paid (status Fechado)."""
    repository = ctx.obj["repository"]
    transaction = _require(ctx, transaction_id)

    # Only open transactions offer this action
    if not transaction.is_open:
        click.echo(f"Error: {already_paid(transaction_id)}", err=True)
        ctx.exit(1)

    try:
        repository.mark_paid(transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)


@click.command("delete")
@click.argument("transaction_id")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_transaction(ctx, transaction_id: str, yes: bool) -> None:
    """Delete a transaction permanently."""
    repository = ctx.obj["repository"]
    transaction = _require(ctx, transaction_id)

    if not yes:
        click.echo("Confirmar Exclusão")
        confirmed = click.confirm(
            f'Tem certeza que deseja excluir o lançamento "{transaction.descricao}"? '
            "Esta ação não pode ser desfeita.",
            default=False,
        )
        if not confirmed:
            click.echo("Cancelled.")
            return

    try:
        repository.remove(transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)


@click.command("barcode")
@click.argument("transaction_id")
@click.pass_context
def show_barcode(ctx, transaction_id: str) -> None:
    """Print a transaction's payment barcode, ready to copy."""
    transaction = _require(ctx, transaction_id)

    if not transaction.has_barcode:
        echo_notification(notifications.BARCODE_COPY_FAILED)
        ctx.exit(1)

    click.echo(transaction.codigo_barras)
    echo_notification(notifications.BARCODE_COPIED)


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(show_transaction)
    cli.add_command(edit_transaction)
    cli.add_command(pay_transaction)
    cli.add_command(delete_transaction)
    cli.add_command(show_barcode)
