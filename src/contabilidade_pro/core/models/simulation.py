"""Tax regime simulation models."""

from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from contabilidade_pro.core.models.enums import Regime
from contabilidade_pro.shared.money import to_decimal


class RegimeSimulationInput(BaseModel):
    """Annual figures used to compare tax regimes."""

    annual_revenue: Decimal = Field(..., description="Receita bruta anual")
    main_activity: str = Field(default="", description="Atividade principal (free text)")
    payroll: Decimal = Field(default=Decimal("0"), ge=0, description="Folha salarial anual")
    operating_expenses: Decimal = Field(
        default=Decimal("0"), ge=0, description="Despesas operacionais anuais"
    )
    regimes: list[Regime] = Field(
        default_factory=lambda: list(Regime),
        description="Regimes to compare",
    )

    model_config = {"frozen": True}

    @field_validator("annual_revenue", "payroll", "operating_expenses", mode="before")
    @classmethod
    def coerce_decimal(cls, v: Any) -> Any:
        if isinstance(v, float):
            return to_decimal(v)
        return v


class RegimeSimulation(BaseModel):
    """Annual tax burden of one regime."""

    regime: Regime
    total_tax: Decimal = Field(default=Decimal("0"))
    effective_rate: Decimal = Field(default=Decimal("0"), description="Percent of revenue")
    details: dict[str, Decimal] = Field(default_factory=dict)
    applicable: bool = True
    reason_not_applicable: Optional[str] = None
    advantages: list[str] = Field(default_factory=list)
    disadvantages: list[str] = Field(default_factory=list)

    model_config = {"frozen": True}


class RegimeComparison(BaseModel):
    """Simulations ordered by tax burden plus a recommendation."""

    simulations: list[RegimeSimulation]
    recommended: Optional[Regime] = None
    annual_savings: Decimal = Field(default=Decimal("0"))
    savings_percentage: Decimal = Field(default=Decimal("0"))
    justification: str = ""

    model_config = {"frozen": True}
