"""Lucro Presumido IRPJ/CSLL models."""

from datetime import date
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field, field_validator

from contabilidade_pro.shared.dates import parse_competence
from contabilidade_pro.shared.money import to_decimal


class IRPJCalculationInput(BaseModel):
    """Inputs of an IRPJ/CSLL calculation under Lucro Presumido."""

    gross_revenue: Decimal = Field(..., description="Receita bruta do período")
    deductions: Decimal = Field(default=Decimal("0"), description="Deduções da receita")
    main_activity: str = Field(..., description="Atividade principal (free text)")
    period: str = Field(..., description="Competence (YYYY-MM)")
    tax_incentives: Decimal = Field(
        default=Decimal("0"), description="Incentivos fiscais abatidos do IRPJ + CSLL"
    )

    model_config = {"frozen": True}

    @field_validator("gross_revenue", "deductions", "tax_incentives", mode="before")
    @classmethod
    def coerce_decimal(cls, v: Any) -> Any:
        """Read floats through their repr."""
        if isinstance(v, float):
            return to_decimal(v)
        return v

    @field_validator("period")
    @classmethod
    def validate_period(cls, v: str) -> str:
        """Competence must be YYYY-MM."""
        parse_competence(v)
        return v.strip()


class IRPJCalculationResult(BaseModel):
    """Result of an IRPJ/CSLL calculation.

    ``total_tax`` is IRPJ only (normal + adicional). CSLL is reported
    separately and joins IRPJ in ``amount_due``.
    """

    total_tax: Decimal = Field(..., description="IRPJ total (normal + adicional)")
    base_amount: Decimal = Field(..., description="Lucro presumido (base de cálculo)")
    normal_tax: Decimal = Field(..., description="IRPJ 15%")
    surtax: Decimal = Field(..., description="Adicional de 10% sobre o excedente de R$ 20.000")
    presumption_percentage: Decimal = Field(..., description="Percentual de presunção")
    due_date: date

    period: str
    gross_revenue: Decimal
    deductions: Decimal
    net_revenue: Decimal = Field(..., description="Receita bruta menos deduções")
    main_activity: str
    csll: Decimal = Field(..., description="CSLL 9% sobre a base")
    tax_incentives: Decimal
    amount_due: Decimal = Field(..., description="IRPJ + CSLL menos incentivos")

    model_config = {"frozen": True}
