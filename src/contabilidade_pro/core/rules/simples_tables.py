"""Simples Nacional bracket tables (Anexos I to V, LC 155/2016).

Each row is (upper_bound, nominal_rate %, deduction, distribution %).
Distribution is the "repartição dos tributos" of the bracket; shares of
each row add up to 100. Update yearly from the statutory tables.
"""

from decimal import Decimal

from contabilidade_pro.core.models.das import TaxBracket
from contabilidade_pro.core.models.enums import Anexo
from contabilidade_pro.core.rules.tax_constants import LIMITE_SIMPLES_NACIONAL
from contabilidade_pro.shared.exceptions import RevenueLimitExceededError, UnknownAnnexError

D = Decimal

_FAIXAS_RBT12 = (
    D("180000"),
    D("360000"),
    D("720000"),
    D("1800000"),
    D("3600000"),
    LIMITE_SIMPLES_NACIONAL,
)


def _dist(**shares: str) -> dict[str, Decimal]:
    return {tributo: D(valor) for tributo, valor in shares.items()}


# (nominal_rate, deduction, distribution) per bracket, same order as _FAIXAS_RBT12
_ANEXOS: dict[Anexo, tuple[tuple[str, str, dict[str, Decimal]], ...]] = {
    # Comércio
    Anexo.I: (
        ("4.0", "0", _dist(irpj="5.50", csll="3.50", cofins="12.74", pis="2.76", cpp="41.50", icms="34.00")),
        ("7.3", "5940", _dist(irpj="5.50", csll="3.50", cofins="12.74", pis="2.76", cpp="41.50", icms="34.00")),
        ("9.5", "13860", _dist(irpj="5.50", csll="3.50", cofins="12.74", pis="2.76", cpp="42.00", icms="33.50")),
        ("10.7", "22500", _dist(irpj="5.50", csll="3.50", cofins="12.74", pis="2.76", cpp="42.00", icms="33.50")),
        ("14.3", "87300", _dist(irpj="5.50", csll="3.50", cofins="12.74", pis="2.76", cpp="42.00", icms="33.50")),
        ("19.0", "378000", _dist(irpj="13.50", csll="10.00", cofins="28.27", pis="6.13", cpp="42.10")),
    ),
    # Indústria
    Anexo.II: (
        ("4.5", "0", _dist(irpj="5.50", csll="3.50", cofins="11.51", pis="2.49", cpp="37.50", ipi="7.50", icms="32.00")),
        ("7.8", "5940", _dist(irpj="5.50", csll="3.50", cofins="11.51", pis="2.49", cpp="37.50", ipi="7.50", icms="32.00")),
        ("10.0", "13860", _dist(irpj="5.50", csll="3.50", cofins="11.51", pis="2.49", cpp="37.50", ipi="7.50", icms="32.00")),
        ("11.2", "22500", _dist(irpj="5.50", csll="3.50", cofins="11.51", pis="2.49", cpp="37.50", ipi="7.50", icms="32.00")),
        ("14.7", "85500", _dist(irpj="5.50", csll="3.50", cofins="11.51", pis="2.49", cpp="37.50", ipi="7.50", icms="32.00")),
        ("30.0", "720000", _dist(irpj="8.50", csll="7.50", cofins="20.96", pis="4.54", cpp="23.50", ipi="35.00")),
    ),
    # Serviços
    Anexo.III: (
        ("6.0", "0", _dist(irpj="4.00", csll="3.50", cofins="12.82", pis="2.78", cpp="43.40", iss="33.50")),
        ("11.2", "9360", _dist(irpj="4.00", csll="3.50", cofins="14.05", pis="3.05", cpp="43.40", iss="32.00")),
        ("13.5", "17640", _dist(irpj="4.00", csll="3.50", cofins="13.64", pis="2.96", cpp="43.40", iss="32.50")),
        ("16.0", "35640", _dist(irpj="4.00", csll="3.50", cofins="13.64", pis="2.96", cpp="43.40", iss="32.50")),
        ("21.0", "125640", _dist(irpj="4.00", csll="3.50", cofins="12.82", pis="2.78", cpp="43.40", iss="33.50")),
        ("33.0", "648000", _dist(irpj="35.00", csll="15.00", cofins="16.03", pis="3.47", cpp="30.50")),
    ),
    # Serviços com CPP recolhida fora do DAS
    Anexo.IV: (
        ("4.5", "0", _dist(irpj="18.80", csll="15.20", cofins="17.67", pis="3.83", iss="44.50")),
        ("9.0", "8100", _dist(irpj="19.80", csll="15.20", cofins="20.55", pis="4.45", iss="40.00")),
        ("10.2", "12420", _dist(irpj="20.80", csll="15.20", cofins="19.73", pis="4.27", iss="40.00")),
        ("14.0", "39780", _dist(irpj="17.80", csll="19.20", cofins="18.90", pis="4.10", iss="40.00")),
        ("22.0", "183780", _dist(irpj="18.80", csll="19.20", cofins="18.08", pis="3.92", iss="40.00")),
        ("33.0", "828000", _dist(irpj="53.50", csll="21.50", cofins="20.55", pis="4.45")),
    ),
    # Serviços intelectuais
    Anexo.V: (
        ("15.5", "0", _dist(irpj="25.00", csll="15.00", cofins="14.10", pis="3.05", cpp="28.85", iss="14.00")),
        ("18.0", "4500", _dist(irpj="23.00", csll="15.00", cofins="14.10", pis="3.05", cpp="27.85", iss="17.00")),
        ("19.5", "9900", _dist(irpj="24.00", csll="15.00", cofins="14.92", pis="3.23", cpp="23.85", iss="19.00")),
        ("20.5", "17100", _dist(irpj="21.00", csll="15.00", cofins="15.74", pis="3.41", cpp="23.85", iss="21.00")),
        ("23.0", "62100", _dist(irpj="23.00", csll="12.50", cofins="14.10", pis="3.05", cpp="23.85", iss="23.50")),
        ("30.5", "540000", _dist(irpj="35.00", csll="15.50", cofins="16.44", pis="3.56", cpp="29.50")),
    ),
}

TABELAS_SIMPLES_2024: dict[Anexo, tuple[TaxBracket, ...]] = {
    anexo: tuple(
        TaxBracket(
            faixa=numero,
            upper_bound=limite,
            nominal_rate=D(aliquota),
            deduction=D(deducao),
            distribution=distribuicao,
        )
        for numero, (limite, (aliquota, deducao, distribuicao)) in enumerate(
            zip(_FAIXAS_RBT12, linhas), start=1
        )
    )
    for anexo, linhas in _ANEXOS.items()
}


def resolve_annex(annex: Anexo | str) -> Anexo:
    """Resolve an annex identifier ("I", "iii", Anexo.V) to its enum member."""
    if isinstance(annex, Anexo):
        return annex
    try:
        return Anexo(str(annex).strip().upper())
    except ValueError:
        raise UnknownAnnexError(f"annex {annex!r} has no bracket table") from None


def lookup(annex: Anexo | str) -> tuple[TaxBracket, ...]:
    """Get the ordered brackets of an annex.

    Raises:
        UnknownAnnexError: if the annex is not one of I to V
    """
    return TABELAS_SIMPLES_2024[resolve_annex(annex)]


def find_bracket(annex: Anexo | str, trailing_12_month_revenue: Decimal) -> TaxBracket:
    """Get the first bracket whose ceiling covers the RBT12.

    Raises:
        UnknownAnnexError: if the annex is not one of I to V
        RevenueLimitExceededError: if the RBT12 is above the last ceiling
    """
    for bracket in lookup(annex):
        if trailing_12_month_revenue <= bracket.upper_bound:
            return bracket

    raise RevenueLimitExceededError(
        f"trailing-12-month revenue {trailing_12_month_revenue} exceeds the "
        f"Simples Nacional limit of {LIMITE_SIMPLES_NACIONAL}"
    )
