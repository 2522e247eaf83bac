"""CSV export command."""

from pathlib import Path

import click
from lancamentos.cli.filter_options import build_filter, filter_options
from lancamentos.cli.rendering import echo_notification
from lancamentos.domain import notifications
from lancamentos.domain.csv_export import export_csv, export_filename
from lancamentos.domain.filters import filter_transactions


@click.command("export")
@filter_options
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    help="Output file (default: lancamentos_<today>.csv in the current directory)",
)
@click.pass_context
def export_transactions(ctx, output: str | None, **options):
    """Export the filtered transactions to a CSV file.

    Examples:
        lancamentos export
        lancamentos export --status Aberto --all-dates -o abertos.csv
    """
    repository = ctx.obj["repository"]
    spec = build_filter(ctx, options)
    transactions = filter_transactions(repository.transactions, spec)

    path = Path(output) if output else Path(export_filename())
    try:
        path.write_text(export_csv(transactions), encoding="utf-8")
    except OSError as e:
        click.echo(f"Error: Could not write {path}: {e}", err=True)
        ctx.exit(1)

    echo_notification(notifications.EXPORTED)
    click.echo(f"Exported {len(transactions)} transaction(s) to {path}")


def register_commands(cli):
    """Register export command with main CLI."""
    cli.add_command(export_transactions)
