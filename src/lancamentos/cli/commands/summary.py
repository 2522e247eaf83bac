"""Summary command."""

import click
from lancamentos.cli.filter_options import build_filter, filter_options
from lancamentos.cli.rendering import echo_totals
from lancamentos.domain.filters import build_view


@click.command("summary")
@filter_options
@click.pass_context
def summary(ctx, **options):
    """Show income, expense and balance totals for the filtered transactions."""
    repository = ctx.obj["repository"]
    spec = build_filter(ctx, options)
    view = build_view(repository.transactions, spec)

    if spec.start_date or spec.end_date:
        start = spec.start_date.strftime("%d/%m/%Y") if spec.start_date else "..."
        end = spec.end_date.strftime("%d/%m/%Y") if spec.end_date else "..."
        click.echo(f"Período: {start} a {end}")
    echo_totals(view.totals)


def register_commands(cli):
    """Register summary command with main CLI."""
    cli.add_command(summary)
