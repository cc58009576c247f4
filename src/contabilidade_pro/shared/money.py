"""Decimal helpers for monetary values and rates.

Currency is carried to centavos and rates to four decimal places, both
rounded half-up as the tax authority does on the DAS and DARF forms.
"""

from decimal import ROUND_HALF_UP, Decimal

CENTAVO = Decimal("0.01")
RATE_QUANTUM = Decimal("0.0001")
ZERO = Decimal("0")


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """Convert a number to Decimal.

    Floats go through their shortest repr so that ``10001.99`` becomes
    ``Decimal("10001.99")`` and not its binary expansion.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


def round_currency(value: Decimal | int | float | str) -> Decimal:
    """Round to 2 decimal places (half-up)."""
    return to_decimal(value).quantize(CENTAVO, rounding=ROUND_HALF_UP)


def round_rate(value: Decimal | int | float | str) -> Decimal:
    """Round a percentage to 4 decimal places (half-up)."""
    return to_decimal(value).quantize(RATE_QUANTUM, rounding=ROUND_HALF_UP)
