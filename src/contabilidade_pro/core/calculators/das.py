"""Simples Nacional DAS calculator."""

from decimal import Decimal

from contabilidade_pro.core.models.das import DASCalculationInput, DASCalculationResult, TaxBracket
from contabilidade_pro.core.rules.simples_tables import find_bracket, resolve_annex
from contabilidade_pro.core.rules.tax_constants import LIMITE_SIMPLES_NACIONAL
from contabilidade_pro.shared.dates import das_due_date
from contabilidade_pro.shared.exceptions import InvalidRevenueError, RevenueLimitExceededError
from contabilidade_pro.shared.money import ZERO, round_currency, round_rate

CEM = Decimal("100")


def effective_rate(trailing_12_month_revenue: Decimal, bracket: TaxBracket) -> Decimal:
    """Unrounded effective rate in percent.

    ((RBT12 x nominal) - deduction) / RBT12, clamped at zero.
    """
    rate = (
        (trailing_12_month_revenue * bracket.nominal_rate / CEM) - bracket.deduction
    ) / trailing_12_month_revenue * CEM
    return max(ZERO, rate)


def split_by_tax(amount: Decimal, bracket: TaxBracket) -> dict[str, Decimal]:
    """Split a DAS amount among its taxes using the bracket distribution."""
    return {
        tributo: round_currency(amount * share / CEM)
        for tributo, share in bracket.distribution.items()
        if share > 0
    }


def calculate_das(data: DASCalculationInput) -> DASCalculationResult:
    """Calculate the monthly DAS of a Simples Nacional company.

    Args:
        data: RBT12, monthly revenue, annex and competence

    Returns:
        DASCalculationResult with the amount, effective rate and due date

    Raises:
        InvalidRevenueError: RBT12 or monthly revenue not positive
        RevenueLimitExceededError: RBT12 above R$ 4.800.000
        UnknownAnnexError: annex without a bracket table
    """
    rbt12 = data.trailing_12_month_revenue

    if rbt12 <= 0:
        raise InvalidRevenueError("trailing-12-month revenue must be positive")

    if rbt12 > LIMITE_SIMPLES_NACIONAL:
        raise RevenueLimitExceededError(
            f"trailing-12-month revenue {rbt12} exceeds the Simples Nacional "
            f"limit of {LIMITE_SIMPLES_NACIONAL}"
        )

    if data.gross_monthly_revenue <= 0:
        raise InvalidRevenueError("monthly revenue must be positive")

    anexo = resolve_annex(data.annex)

    bracket = find_bracket(anexo, rbt12)
    rate = effective_rate(rbt12, bracket)
    tax_amount = round_currency(data.gross_monthly_revenue * rate / CEM)

    return DASCalculationResult(
        tax_amount=tax_amount,
        effective_rate=round_rate(rate),
        due_date=das_due_date(data.period),
        base_amount=data.gross_monthly_revenue,
        bracket_used=bracket,
        annex=anexo,
        period=data.period,
        trailing_12_month_revenue=rbt12,
        nominal_rate=bracket.nominal_rate,
        deduction=bracket.deduction,
        breakdown=split_by_tax(tax_amount, bracket),
    )
