"""Domain models for fiscal calculations."""

from contabilidade_pro.core.models.das import (
    DASCalculationInput,
    DASCalculationResult,
    TaxBracket,
)
from contabilidade_pro.core.models.enums import Anexo, AtividadeMEI, Regime
from contabilidade_pro.core.models.irpj import IRPJCalculationInput, IRPJCalculationResult
from contabilidade_pro.core.models.mei import MEICalculationInput, MEICalculationResult
from contabilidade_pro.core.models.simulation import (
    RegimeComparison,
    RegimeSimulation,
    RegimeSimulationInput,
)

__all__ = [
    "Anexo",
    "AtividadeMEI",
    "Regime",
    "TaxBracket",
    "DASCalculationInput",
    "DASCalculationResult",
    "IRPJCalculationInput",
    "IRPJCalculationResult",
    "MEICalculationInput",
    "MEICalculationResult",
    "RegimeSimulationInput",
    "RegimeSimulation",
    "RegimeComparison",
]
