"""Competence parsing and statutory due dates."""

import calendar
import re
from datetime import date

from contabilidade_pro.shared.exceptions import InvalidPeriodError

COMPETENCE_PATTERN = re.compile(r"^(\d{4})-(\d{2})$")

# DAS and DAS-MEI are due on this day of the following month
DIA_VENCIMENTO_DAS = 20


def parse_competence(period: str) -> tuple[int, int]:
    """
    Parse a competence string.

    Args:
        period: Competence in the ``YYYY-MM`` format

    Returns:
        (year, month) tuple

    Raises:
        InvalidPeriodError: if the string is not a valid year-month
    """
    match = COMPETENCE_PATTERN.match(period.strip()) if isinstance(period, str) else None
    if match is None:
        raise InvalidPeriodError(f"competence must use the YYYY-MM format, got {period!r}")

    year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12:
        raise InvalidPeriodError(f"competence month must be between 01 and 12, got {month:02d}")

    return year, month


def _next_month(year: int, month: int) -> tuple[int, int]:
    if month == 12:
        return year + 1, 1
    return year, month + 1


def das_due_date(period: str) -> date:
    """Day 20 of the month following the competence."""
    year, month = _next_month(*parse_competence(period))
    return date(year, month, DIA_VENCIMENTO_DAS)


def irpj_due_date(period: str) -> date:
    """Last calendar day of the month following the competence."""
    year, month = _next_month(*parse_competence(period))
    return date(year, month, calendar.monthrange(year, month)[1])
