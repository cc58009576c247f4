"""Fiscal calculators."""

from contabilidade_pro.core.calculators.das import calculate_das
from contabilidade_pro.core.calculators.irpj import calculate_irpj
from contabilidade_pro.core.calculators.mei import calculate_mei
from contabilidade_pro.core.calculators.simulator import RegimeSimulator, simulate_regimes

__all__ = [
    "calculate_das",
    "calculate_irpj",
    "calculate_mei",
    "RegimeSimulator",
    "simulate_regimes",
]
