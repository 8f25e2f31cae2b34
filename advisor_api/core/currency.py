"""Currency conversion and formatting for display.

Amounts are kept in the base currency (BRL) everywhere else; conversion
happens only here, with fixed illustrative rates.
"""

from advisor_api.domain.constants import CURRENCY_RATES, CURRENCY_SYMBOLS
from advisor_api.domain.entities import Currency


def convert(value: float, currency: Currency) -> float:
    """Convert a base-currency value into the display currency."""
    return value * CURRENCY_RATES[currency]


def _format_pt_br(value: float) -> str:
    """Format with pt-BR separators: 1234567.891 -> '1.234.567,89'."""
    text = f"{value:,.2f}"
    return text.replace(",", "_").replace(".", ",").replace("_", ".")


def format_currency(value: float, currency: Currency = Currency.BRL) -> str:
    """Convert and format a base-currency value.

    Args:
        value: Amount in the base currency
        currency: Display currency

    Returns:
        String like "R$ 10.000,00" or "$ 2.000,00"
    """
    return f"{CURRENCY_SYMBOLS[currency]} {_format_pt_br(convert(value, currency))}"


def format_percent(value: float, signed: bool = True) -> str:
    """Format a percentage with two decimals, e.g. "+2.20%"."""
    if signed and value >= 0:
        return f"+{value:.2f}%"
    return f"{value:.2f}%"
