"""CLI helpers for date range resolution."""

from datetime import date

import click

from lancamentos.utils.date_parser import get_date_range, month_range, parse_date

PERIOD_FLAGS = ("this-month", "last-month", "this-year", "last-year")


def resolve_cli_date_range(
    ctx,
    *,
    start_date: str | None,
    end_date: str | None,
    period_flags: dict[str, bool],
    all_dates: bool = False,
) -> tuple[date | None, date | None]:
    """Resolve CLI date range from period flags or explicit dates.

    With nothing given, the range defaults to the whole current month.
    ``all_dates`` lifts both bounds.
    """
    period_count = sum(1 for is_set in period_flags.values() if is_set)

    if period_count + int(all_dates) > 1:
        click.echo(
            "Error: Only one period option (--this-month, --last-month, --this-year, --last-year, --all-dates) can be specified at a time.",
            err=True,
        )
        ctx.exit(1)

    if (period_count > 0 or all_dates) and (start_date or end_date):
        click.echo(
            "Error: Period options (--this-month, --all-dates, etc.) cannot be combined with --start-date or --end-date.",
            err=True,
        )
        ctx.exit(1)

    if all_dates:
        return None, None

    start = None
    end = None

    if period_count == 1:
        for period, is_set in period_flags.items():
            if is_set:
                start, end = get_date_range(period)
                break
    else:
        if start_date:
            try:
                start = parse_date(start_date)
            except ValueError as e:
                click.echo(f"Error: Invalid start date: {e}", err=True)
                ctx.exit(1)

        if end_date:
            try:
                end = parse_date(end_date)
            except ValueError as e:
                click.echo(f"Error: Invalid end date: {e}", err=True)
                ctx.exit(1)

        if start is None and end is None:
            start, end = month_range(date.today())

    return start, end
