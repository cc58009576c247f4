"""DAS-MEI models."""

from datetime import date
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field, field_validator

from contabilidade_pro.core.models.enums import AtividadeMEI
from contabilidade_pro.shared.dates import parse_competence
from contabilidade_pro.shared.money import to_decimal


class MEICalculationInput(BaseModel):
    """Inputs of a monthly DAS-MEI calculation."""

    monthly_revenue: Decimal = Field(..., description="Receita bruta do mês")
    activity: str = Field(..., description="comercio, servicos or comercio_servicos")
    period: str = Field(..., description="Competence (YYYY-MM)")

    model_config = {"frozen": True}

    @field_validator("monthly_revenue", mode="before")
    @classmethod
    def coerce_decimal(cls, v: Any) -> Any:
        """Read floats through their repr."""
        if isinstance(v, float):
            return to_decimal(v)
        return v

    @field_validator("activity", mode="before")
    @classmethod
    def normalize_activity(cls, v: Any) -> Any:
        if isinstance(v, AtividadeMEI):
            return v.value
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("period")
    @classmethod
    def validate_period(cls, v: str) -> str:
        """Competence must be YYYY-MM."""
        parse_competence(v)
        return v.strip()


class MEICalculationResult(BaseModel):
    """Result of a DAS-MEI calculation."""

    monthly_amount: Decimal = Field(..., description="Valor fixo da DAS-MEI")
    inss: Decimal
    icms: Decimal
    iss: Decimal
    activity: AtividadeMEI
    period: str
    monthly_revenue: Decimal
    projected_annual_revenue: Decimal
    limit_usage_percentage: Decimal = Field(..., description="Projection over the annual limit, in percent")
    limit_exceeded: bool
    due_date: date

    model_config = {"frozen": True}
