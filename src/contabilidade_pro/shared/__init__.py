"""Shared utilities for ContabilidadePRO."""

from contabilidade_pro.shared.dates import das_due_date, irpj_due_date, parse_competence
from contabilidade_pro.shared.money import round_currency, round_rate, to_decimal
from contabilidade_pro.shared.validators import format_cnpj, validate_cnpj

__all__ = [
    # Dates
    "das_due_date",
    "irpj_due_date",
    "parse_competence",
    # Money
    "round_currency",
    "round_rate",
    "to_decimal",
    # Validators
    "format_cnpj",
    "validate_cnpj",
]
