"""Add transaction command."""

import click
from lancamentos.cli.error_handling import handle_domain_error, handle_form_error
from lancamentos.cli.rendering import echo_transaction_detail
from lancamentos.domain.errors import DomainError, FormValidationError
from lancamentos.domain.form import TransactionForm


@click.command("add")
@click.option(
    "--data",
    "data_vencimento",
    default="hoje",
    show_default=True,
    help="Due date (YYYY-MM-DD, DD/MM/YYYY or relative like 'hoje', 'amanhã')",
)
@click.option("--descricao", help="Description (e.g., Casa, Loja, Servidor)")
@click.option("--observacao", help="Additional details")
@click.option("--categoria", help="Category: Custo Fixo, Custo Extra or Receita")
@click.option("--tipo", help="Type: Saida or Receita")
@click.option("--valor", help="Amount in reais (e.g., 90,00 or 1234.56)")
@click.option("--status", default="Aberto", show_default=True, help="Status: Aberto or Fechado")
@click.option("--codigo-barras", help="Payment barcode (optional)")
@click.pass_context
def add_transaction(
    ctx,
    data_vencimento: str,
    descricao: str | None,
    observacao: str | None,
    categoria: str | None,
    tipo: str | None,
    valor: str | None,
    status: str,
    codigo_barras: str | None,
):
    """Create a new transaction.

    Examples:
        lancamentos add --data 2025-09-19 --descricao Loja --categoria "Custo Fixo" --tipo Saida --valor 334
        lancamentos add --descricao Salário --categoria Receita --tipo Receita --valor "5.000,00" --status Fechado
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
        draft = form.validate()
    except FormValidationError as e:
        handle_form_error(ctx, e)

    try:
        created = repository.add(draft)
    except DomainError as e:
        handle_domain_error(ctx, e)

    echo_transaction_detail(created)


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
