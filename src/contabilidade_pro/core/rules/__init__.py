"""Statutory tables and tax constants."""

from contabilidade_pro.core.rules.simples_tables import (
    TABELAS_SIMPLES_2024,
    find_bracket,
    lookup,
    resolve_annex,
)
from contabilidade_pro.core.rules.tax_constants import (
    ALIQUOTA_ADICIONAL_IRPJ,
    ALIQUOTA_CSLL,
    ALIQUOTA_IRPJ,
    LIMITE_ADICIONAL_IRPJ_ANUAL,
    LIMITE_ADICIONAL_IRPJ_MENSAL,
    LIMITE_LUCRO_PRESUMIDO,
    LIMITE_MEI_ANUAL,
    LIMITE_SIMPLES_NACIONAL,
    VALORES_MEI_2025,
    obter_percentual_presuncao,
)

__all__ = [
    "TABELAS_SIMPLES_2024",
    "find_bracket",
    "lookup",
    "resolve_annex",
    "ALIQUOTA_ADICIONAL_IRPJ",
    "ALIQUOTA_CSLL",
    "ALIQUOTA_IRPJ",
    "LIMITE_ADICIONAL_IRPJ_ANUAL",
    "LIMITE_ADICIONAL_IRPJ_MENSAL",
    "LIMITE_LUCRO_PRESUMIDO",
    "LIMITE_MEI_ANUAL",
    "LIMITE_SIMPLES_NACIONAL",
    "VALORES_MEI_2025",
    "obter_percentual_presuncao",
]
