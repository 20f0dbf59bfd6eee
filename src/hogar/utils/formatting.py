"""Currency formatting for the household locale (es-CO)."""
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union

from hogar.config.settings import get_settings

Number = Union[int, float, Decimal]


def format_amount(amount: Number) -> str:
    """
    Format a number the way es-CO writes it: dot thousands, comma decimals.

    Whole amounts drop the decimal part; fractional amounts keep two digits.
    """
    value = Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    value = abs(value)
    whole, cents = divmod(value, 1)
    grouped = f"{int(whole):,}".replace(",", ".")
    if cents:
        return f"{sign}{grouped},{int(cents * 100):02d}"
    return f"{sign}{grouped}"


def format_currency(amount: Number, currency: Optional[str] = None) -> str:
    """Format an amount with the configured currency code, e.g. ``COP 1.250.000``."""
    code = currency or get_settings().CURRENCY_CODE
    return f"{code} {format_amount(amount)}"
