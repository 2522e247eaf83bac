"""Filter options shared by the list, summary and export commands."""

import click

from lancamentos.cli.date_filters import PERIOD_FLAGS, resolve_cli_date_range
from lancamentos.cli.error_handling import handle_domain_error
from lancamentos.domain.entities import Categoria, Status, Tipo
from lancamentos.domain.errors import ValidationError
from lancamentos.domain.filters import ALL, TransactionFilter


def _choice_help(enum_cls) -> str:
    return ", ".join([ALL] + enum_cls.choices())


FILTER_OPTIONS = [
    click.option("--search", help="Text searched in description and notes (case-insensitive)"),
    click.option("--categoria", default=ALL, show_default=True, help=f"Category ({_choice_help(Categoria)})"),
    click.option("--tipo", default=ALL, show_default=True, help=f"Type ({_choice_help(Tipo)})"),
    click.option("--status", default=ALL, show_default=True, help=f"Status ({_choice_help(Status)})"),
    click.option("--start-date", help="Start due date, inclusive (YYYY-MM-DD, DD/MM/YYYY or 'hoje')"),
    click.option("--end-date", help="End due date, inclusive (YYYY-MM-DD, DD/MM/YYYY or 'hoje')"),
    click.option("--this-month", is_flag=True, help="Current month (default)"),
    click.option("--last-month", is_flag=True, help="Previous month"),
    click.option("--this-year", is_flag=True, help="Current year"),
    click.option("--last-year", is_flag=True, help="Previous year"),
    click.option("--all-dates", is_flag=True, help="Do not restrict due dates"),
]


def filter_options(command):
    """Decorate a command with every filter option."""
    for option in reversed(FILTER_OPTIONS):
        command = option(command)
    return command


def build_filter(ctx: click.Context, options: dict) -> TransactionFilter:
    """Turn parsed filter options into a TransactionFilter, exiting on bad input."""
    start, end = resolve_cli_date_range(
        ctx,
        start_date=options.get("start_date"),
        end_date=options.get("end_date"),
        period_flags={period: options.get(period.replace("-", "_"), False) for period in PERIOD_FLAGS},
        all_dates=options.get("all_dates", False),
    )
    try:
        return TransactionFilter.from_options(
            search_term=options.get("search"),
            categoria=options.get("categoria"),
            tipo=options.get("tipo"),
            status=options.get("status"),
            start_date=start,
            end_date=end,
        )
    except ValidationError as e:
        handle_domain_error(ctx, e)
