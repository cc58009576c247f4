"""DAS-MEI calculator."""

from decimal import Decimal

from contabilidade_pro.core.models.enums import AtividadeMEI
from contabilidade_pro.core.models.mei import MEICalculationInput, MEICalculationResult
from contabilidade_pro.core.rules.tax_constants import LIMITE_MEI_ANUAL, VALORES_MEI_2025
from contabilidade_pro.shared.dates import das_due_date
from contabilidade_pro.shared.exceptions import InvalidRevenueError, UnknownActivityError
from contabilidade_pro.shared.money import round_currency


def calculate_mei(data: MEICalculationInput) -> MEICalculationResult:
    """Calculate the monthly DAS-MEI.

    The amount is fixed by activity group; revenue only feeds the annual
    limit projection.

    Raises:
        InvalidRevenueError: negative monthly revenue
        UnknownActivityError: activity outside comercio/servicos/comercio_servicos
    """
    if data.monthly_revenue < 0:
        raise InvalidRevenueError("monthly revenue cannot be negative")

    try:
        atividade = AtividadeMEI(data.activity)
    except ValueError:
        raise UnknownActivityError(f"unknown MEI activity {data.activity!r}") from None

    valores = VALORES_MEI_2025[atividade.value]
    projecao = data.monthly_revenue * 12

    return MEICalculationResult(
        monthly_amount=valores["inss"] + valores["icms"] + valores["iss"],
        inss=valores["inss"],
        icms=valores["icms"],
        iss=valores["iss"],
        activity=atividade,
        period=data.period,
        monthly_revenue=data.monthly_revenue,
        projected_annual_revenue=projecao,
        limit_usage_percentage=round_currency(projecao / LIMITE_MEI_ANUAL * Decimal("100")),
        limit_exceeded=projecao > LIMITE_MEI_ANUAL,
        due_date=das_due_date(data.period),
    )
