"""Value formatters for display."""

from datetime import date
from decimal import Decimal


def format_currency(value: Decimal, symbol: str = "R$") -> str:
    """
    Format decimal as Brazilian currency.

    Args:
        value: Decimal value to format
        symbol: Currency symbol (default: R$)

    Returns:
        Formatted string like "R$ 1.234,56"
    """
    negative = value < 0
    value = abs(value)

    formatted = f"{value:,.2f}"

    # Convert to Brazilian format (. for thousands, , for decimals)
    formatted = formatted.replace(",", "X").replace(".", ",").replace("X", ".")

    result = f"{symbol} {formatted}"
    return f"-{result}" if negative else result


def format_percentage(value: Decimal, decimals: int = 2) -> str:
    """
    Format decimal as percentage.

    Args:
        value: Decimal value (e.g., 5.32 for 5.32%)
        decimals: Number of decimal places

    Returns:
        Formatted string like "5,32%"
    """
    formatted = f"{value:.{decimals}f}".replace(".", ",")
    return f"{formatted}%"


def format_date(value: date) -> str:
    """Format date as DD/MM/YYYY."""
    return value.strftime("%d/%m/%Y")
