"""Simples Nacional DAS models."""

from datetime import date
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field, field_validator

from contabilidade_pro.core.models.enums import Anexo
from contabilidade_pro.shared.dates import parse_competence
from contabilidade_pro.shared.money import to_decimal


class TaxBracket(BaseModel):
    """One revenue range ("faixa") of a Simples Nacional annex."""

    faixa: int = Field(..., ge=1, le=6, description="Bracket number inside the annex")
    upper_bound: Decimal = Field(..., description="Inclusive RBT12 ceiling")
    nominal_rate: Decimal = Field(..., description="Nominal rate in percent")
    deduction: Decimal = Field(..., description="Parcela a deduzir")
    distribution: dict[str, Decimal] = Field(
        default_factory=dict,
        description="Share of each tax in the DAS, in percent",
    )

    model_config = {"frozen": True}


class DASCalculationInput(BaseModel):
    """Inputs of a monthly DAS calculation.

    Monetary fields are checked by the calculator, not here, so that the
    first failing rule decides which error is raised.
    """

    trailing_12_month_revenue: Decimal = Field(
        ..., description="Receita bruta dos últimos 12 meses (RBT12)"
    )
    gross_monthly_revenue: Decimal = Field(..., description="Receita bruta do mês")
    annex: str = Field(default=Anexo.I.value, description="Annex identifier (I to V)")
    period: str = Field(..., description="Competence (YYYY-MM)")

    model_config = {"frozen": True}

    @field_validator("trailing_12_month_revenue", "gross_monthly_revenue", mode="before")
    @classmethod
    def coerce_decimal(cls, v: Any) -> Any:
        """Read floats through their repr."""
        if isinstance(v, float):
            return to_decimal(v)
        return v

    @field_validator("annex", mode="before")
    @classmethod
    def normalize_annex(cls, v: Any) -> Any:
        """Accept Anexo members and lowercase/padded strings."""
        if isinstance(v, Anexo):
            return v.value
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("period")
    @classmethod
    def validate_period(cls, v: str) -> str:
        """Competence must be YYYY-MM."""
        parse_competence(v)
        return v.strip()


class DASCalculationResult(BaseModel):
    """Result of a DAS calculation."""

    tax_amount: Decimal = Field(..., description="Valor do DAS (2 decimals)")
    effective_rate: Decimal = Field(..., description="Alíquota efetiva in percent (4 decimals)")
    due_date: date = Field(..., description="Data de vencimento")
    base_amount: Decimal = Field(..., description="Base de cálculo (monthly revenue)")
    bracket_used: TaxBracket

    annex: Anexo
    period: str
    trailing_12_month_revenue: Decimal
    nominal_rate: Decimal
    deduction: Decimal
    breakdown: dict[str, Decimal] = Field(
        default_factory=dict, description="DAS amount split per tax"
    )

    model_config = {"frozen": True}
