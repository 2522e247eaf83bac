"""Transaction viewing commands."""

import click
from lancamentos.cli.filter_options import build_filter, filter_options
from lancamentos.cli.rendering import echo_totals, echo_transaction_detail, echo_transaction_table
from lancamentos.domain.filters import build_view


@click.command("list")
@filter_options
@click.option("--verbose", "-v", is_flag=True, help="Show every field, including notes, barcode and timestamps")
@click.pass_context
def list_transactions(ctx, verbose: bool, **options):
    """List transactions matching the filters, with their totals.

    By default only transactions due in the current month are shown.

    Examples:
        lancamentos list
        lancamentos list --tipo Saida --status Aberto
        lancamentos list --search internet --all-dates
    """
    repository = ctx.obj["repository"]
    spec = build_filter(ctx, options)
    view = build_view(repository.transactions, spec)

    if not view.transactions:
        click.echo("No transactions found.")
        return

    if verbose:
        click.echo(f"\n{len(view.transactions)} lançamento(s) encontrado(s):")
        click.echo("=" * 80)
        for txn in view.transactions:
            echo_transaction_detail(txn)
    else:
        echo_transaction_table(view.transactions)

    click.echo()
    echo_totals(view.totals)


def register_commands(cli):
    """Register list command with main CLI."""
    cli.add_command(list_transactions)
