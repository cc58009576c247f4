"""Tax constants for Simples Nacional, MEI and Lucro Presumido/Real.

Values follow LC 123/2006 (as amended by LC 155/2016), Lei 9.249/1995 and
the 2025 MEI contribution amounts published by the Receita Federal.
Sources:
- https://www8.receita.fazenda.gov.br/SimplesNacional/
- https://www.gov.br/empresas-e-negocios/pt-br/empreendedor
"""

from decimal import Decimal

# === Simples Nacional ===

# Annual gross revenue ceiling (RBT12) for the program
LIMITE_SIMPLES_NACIONAL = Decimal("4800000")

# === Lucro Presumido / Lucro Real ===

# Annual gross revenue ceiling for Lucro Presumido (Lei 12.814/2013)
LIMITE_LUCRO_PRESUMIDO = Decimal("78000000")

ALIQUOTA_IRPJ = Decimal("0.15")
ALIQUOTA_ADICIONAL_IRPJ = Decimal("0.10")

# Adicional applies over the base exceeding R$ 20.000 per month of the period
LIMITE_ADICIONAL_IRPJ_MENSAL = Decimal("20000")
LIMITE_ADICIONAL_IRPJ_ANUAL = LIMITE_ADICIONAL_IRPJ_MENSAL * 12

ALIQUOTA_CSLL = Decimal("0.09")

# PIS/COFINS: cumulative (Presumido) and non-cumulative (Real)
ALIQUOTA_PIS_CUMULATIVO = Decimal("0.0065")
ALIQUOTA_COFINS_CUMULATIVO = Decimal("0.03")
ALIQUOTA_PIS_NAO_CUMULATIVO = Decimal("0.0165")
ALIQUOTA_COFINS_NAO_CUMULATIVO = Decimal("0.076")

# Contribuição Patronal Previdenciária over payroll
ALIQUOTA_CPP = Decimal("0.20")

# === Presumption percentages (Lei 9.249/1995, art. 15) ===
# Checked in order; first keyword found in the activity wins.

PRESUNCAO_SERVICOS = Decimal("32")
PRESUNCAO_TRANSPORTE_CONSTRUCAO = Decimal("16")
PRESUNCAO_REVENDA_COMBUSTIVEL = Decimal("1.6")
PRESUNCAO_PADRAO = Decimal("8")  # comércio e indústria

PALAVRAS_PRESUNCAO: tuple[tuple[Decimal, tuple[str, ...]], ...] = (
    (
        PRESUNCAO_SERVICOS,
        (
            "serviço",
            "servico",
            "consultoria",
            "advocacia",
            "contabilidade",
            "engenharia",
            "medicina",
            "odontologia",
        ),
    ),
    (
        PRESUNCAO_TRANSPORTE_CONSTRUCAO,
        ("transporte", "construção", "construcao", "intermediação", "intermediacao"),
    ),
    (
        PRESUNCAO_REVENDA_COMBUSTIVEL,
        ("revenda", "combustível", "combustivel"),
    ),
)

# === MEI (2025) ===

LIMITE_MEI_ANUAL = Decimal("81000")

# Monthly DAS-MEI composition per activity group
VALORES_MEI_2025: dict[str, dict[str, Decimal]] = {
    "comercio": {
        "inss": Decimal("61.60"),
        "icms": Decimal("5.00"),
        "iss": Decimal("0.00"),
    },
    "servicos": {
        "inss": Decimal("61.60"),
        "icms": Decimal("0.00"),
        "iss": Decimal("9.00"),
    },
    "comercio_servicos": {
        "inss": Decimal("61.60"),
        "icms": Decimal("5.00"),
        "iss": Decimal("5.00"),
    },
}


def obter_percentual_presuncao(atividade: str) -> Decimal:
    """Get the IRPJ presumption percentage for a free-text activity.

    Args:
        atividade: Main activity description (e.g. "serviços de consultoria")

    Returns:
        Presumption percentage (32, 16, 1.6 or the 8% default)
    """
    texto = atividade.lower()
    for percentual, palavras in PALAVRAS_PRESUNCAO:
        if any(palavra in texto for palavra in palavras):
            return percentual
    return PRESUNCAO_PADRAO
