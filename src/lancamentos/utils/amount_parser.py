"""Amount parsing and formatting utilities."""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
import re

CENTS = Decimal("0.01")
_DOT_THOUSANDS = re.compile(r"[-+]?[1-9]\d{0,2}(\.\d{3})+")


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "123,45"
    - "R$ 123,45"
    - "1.234,56" (Brazilian thousands separator)
    - "1,234.56"
    - "-123.45" and "(123.45)" (negative)

    Whichever of "," and "." appears last is taken as the decimal separator,
    except that dots alone in groups of three digits ("1.234", "1.234.567")
    are thousands separators.

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()

    # Handle parentheses notation (negative)
    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    # Remove currency symbols
    amount_str = re.sub(r"R\$|[$€£¥]", "", amount_str)
    amount_str = amount_str.replace(" ", "").replace("\xa0", "")

    last_comma = amount_str.rfind(",")
    last_dot = amount_str.rfind(".")
    if last_comma > last_dot:
        amount_str = amount_str.replace(".", "").replace(",", ".")
    elif last_comma == -1 and _DOT_THOUSANDS.fullmatch(amount_str):
        # "1.234" and "1.234.567" are Brazilian thousands groups
        amount_str = amount_str.replace(".", "")
    else:
        amount_str = amount_str.replace(",", "")

    try:
        amount = Decimal(amount_str)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}'") from e
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")
    if is_negative:
        amount = -amount
    return amount


def quantize_amount(amount: Decimal) -> Decimal:
    """Round an amount to cents, half up."""
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


def format_brl(amount: Decimal) -> str:
    """Format an amount as Brazilian reais, e.g. ``R$ 1.234,56``."""
    amount = quantize_amount(Decimal(amount))
    sign = "-" if amount < 0 else ""
    formatted = f"{abs(amount):,.2f}"
    formatted = formatted.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}R$ {formatted}"
