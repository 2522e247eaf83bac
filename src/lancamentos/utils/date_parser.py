"""Date parsing utilities."""

import calendar
from datetime import date, timedelta
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - ISO dates: "2025-09-19"
    - Brazilian dates (day first): "19/09/2025"
    - Relative dates: "hoje", "ontem", "amanhã", "today", "yesterday", "tomorrow"

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    if not date_str:
        raise ValueError("Empty date string")
    today = date.today()

    relative_dates = {
        "today": today,
        "hoje": today,
        "yesterday": today - timedelta(days=1),
        "ontem": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
        "amanhã": today + timedelta(days=1),
        "amanha": today + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    try:
        return date.fromisoformat(date_str)
    except ValueError:
        pass

    # Anything else is read the Brazilian way, day before month
    try:
        dt = date_parser.parse(date_str, dayfirst=True)
        return dt.date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def get_date_range(period: str, today: date | None = None) -> tuple[date, date]:
    """Get start and end dates for a specified period.

    Ranges always cover whole calendar months or years, so a month range
    ends on the last day of that month.

    Args:
        period: Period string (this-month, last-month, this-year, last-year)
        today: Reference day, defaults to the current date

    Returns:
        Tuple of (start_date, end_date) for the specified period

    Raises:
        ValueError: If period string is not recognized
    """
    period = period.strip().lower()
    today = today or date.today()

    if period == "this-month":
        return month_range(today)

    elif period == "last-month":
        return month_range(today - relativedelta(months=1))

    elif period == "this-year":
        return (today.replace(month=1, day=1), today.replace(month=12, day=31))

    elif period == "last-year":
        last_year = today.year - 1
        return (date(last_year, 1, 1), date(last_year, 12, 31))

    else:
        raise ValueError(
            f"Unknown period: '{period}'. Supported periods: this-month, last-month, this-year, last-year"
        )


def month_range(day: date) -> tuple[date, date]:
    """Return the first and last day of the month containing ``day``."""
    last_day = calendar.monthrange(day.year, day.month)[1]
    return (day.replace(day=1), day.replace(day=last_day))
