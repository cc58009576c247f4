"""Lucro Presumido IRPJ/CSLL calculator."""

from decimal import Decimal

from contabilidade_pro.core.models.irpj import IRPJCalculationInput, IRPJCalculationResult
from contabilidade_pro.core.rules.tax_constants import (
    ALIQUOTA_ADICIONAL_IRPJ,
    ALIQUOTA_CSLL,
    ALIQUOTA_IRPJ,
    LIMITE_ADICIONAL_IRPJ_MENSAL,
    obter_percentual_presuncao,
)
from contabilidade_pro.shared.dates import irpj_due_date
from contabilidade_pro.shared.exceptions import InvalidDeductionError, InvalidRevenueError
from contabilidade_pro.shared.money import ZERO, round_currency


def irpj_surtax(base: Decimal, limit: Decimal = LIMITE_ADICIONAL_IRPJ_MENSAL) -> Decimal:
    """Adicional de IRPJ: 10% over the base exceeding ``limit``."""
    return max(ZERO, (base - limit) * ALIQUOTA_ADICIONAL_IRPJ)


def calculate_irpj(data: IRPJCalculationInput) -> IRPJCalculationResult:
    """Calculate IRPJ and CSLL under Lucro Presumido.

    Money is rounded to centavos at each step, so ``total_tax`` is exactly
    ``normal_tax + surtax``.

    Raises:
        InvalidRevenueError: gross revenue not positive
        InvalidDeductionError: negative deductions or incentives, or
            deductions above the gross revenue
    """
    if data.gross_revenue <= 0:
        raise InvalidRevenueError("gross revenue must be positive")

    if data.deductions < 0:
        raise InvalidDeductionError("deductions cannot be negative")

    if data.deductions > data.gross_revenue:
        raise InvalidDeductionError("deductions cannot exceed gross revenue")

    if data.tax_incentives < 0:
        raise InvalidDeductionError("tax incentives cannot be negative")

    presuncao = obter_percentual_presuncao(data.main_activity)
    net_revenue = data.gross_revenue - data.deductions

    base = round_currency(net_revenue * presuncao / Decimal("100"))
    normal_tax = round_currency(base * ALIQUOTA_IRPJ)
    surtax = round_currency(irpj_surtax(base))
    total_tax = normal_tax + surtax

    csll = round_currency(base * ALIQUOTA_CSLL)
    amount_due = max(ZERO, total_tax + csll - data.tax_incentives)

    return IRPJCalculationResult(
        total_tax=total_tax,
        base_amount=base,
        normal_tax=normal_tax,
        surtax=surtax,
        presumption_percentage=presuncao,
        due_date=irpj_due_date(data.period),
        period=data.period,
        gross_revenue=data.gross_revenue,
        deductions=data.deductions,
        net_revenue=net_revenue,
        main_activity=data.main_activity,
        csll=csll,
        tax_incentives=data.tax_incentives,
        amount_due=round_currency(amount_due),
    )
