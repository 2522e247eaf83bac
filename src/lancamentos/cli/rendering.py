"""Terminal rendering of notifications, transactions and totals."""

import click

from lancamentos.domain.entities import Totals, Transaction
from lancamentos.domain.notifications import Notification
from lancamentos.utils.amount_parser import format_brl


def echo_notification(notification: Notification) -> None:
    """Notifier printing to the terminal, destructive ones to stderr."""
    click.echo(
        f"{notification.title}: {notification.description}",
        err=notification.is_destructive,
    )


def format_due_date(transaction: Transaction) -> str:
    return transaction.data_vencimento.strftime("%d/%m/%Y")


def row_actions(transaction: Transaction) -> str:
    """Row actions available for a transaction."""
    actions = ["edit", "delete"]
    if transaction.is_open:
        actions.insert(1, "pay")
    if transaction.has_barcode:
        actions.append("barcode")
    return ",".join(actions)


def echo_transaction_table(transactions: tuple[Transaction, ...]) -> None:
    click.echo(f"\n{len(transactions)} lançamento(s) encontrado(s):")
    click.echo("-" * 150)
    click.echo(
        f"{'ID':<37} {'Vencimento':<11} {'Descrição':<25} {'Categoria':<12} "
        f"{'Tipo':<8} {'Valor':>14} {'Status':<8} {'Ações':<25}"
    )
    click.echo("-" * 150)

    for txn in transactions:
        click.echo(
            f"{txn.id:<37} {format_due_date(txn):<11} {txn.descricao[:25]:<25} "
            f"{txn.categoria.label:<12} {txn.tipo.label:<8} {format_brl(txn.valor):>14} "
            f"{txn.status.label:<8} {row_actions(txn):<25}"
        )


def echo_transaction_detail(txn: Transaction) -> None:
    click.echo(f"\nLançamento: {txn.id}")
    click.echo(f"  Vencimento: {format_due_date(txn)}")
    click.echo(f"  Descrição: {txn.descricao}")
    if txn.observacao:
        click.echo(f"  Observação: {txn.observacao}")
    click.echo(f"  Categoria: {txn.categoria.label}")
    click.echo(f"  Tipo: {txn.tipo.label}")
    click.echo(f"  Valor: {format_brl(txn.valor)}")
    click.echo(f"  Status: {txn.status.label}")
    if txn.codigo_barras:
        click.echo(f"  Código de Barras: {txn.codigo_barras}")
    if txn.created_at:
        click.echo(f"  Criado em: {txn.created_at:%d/%m/%Y %H:%M}")
    if txn.updated_at:
        click.echo(f"  Atualizado em: {txn.updated_at:%d/%m/%Y %H:%M}")
    click.echo("-" * 80)


def echo_totals(totals: Totals) -> None:
    """Render the three summary cards."""
    click.echo(f"Total Receitas (Filtrado): {format_brl(totals.receitas)}  ({totals.receitas_count} receita(s))")
    click.echo(f"Total Saídas (Filtrado):   {format_brl(totals.saidas)}  ({totals.saidas_count} saída(s))")
    click.echo(f"Saldo (Filtrado):          {format_brl(totals.saldo)}  ({totals.total_transactions} total de lançamentos)")
