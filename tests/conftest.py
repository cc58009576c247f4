"""Pytest configuration and fixtures."""

from decimal import Decimal

import pytest

from contabilidade_pro.core.models import DASCalculationInput, IRPJCalculationInput


@pytest.fixture
def das_input():
    """Factory for DAS inputs with Annex I / 2024-01 defaults."""

    def _make(rbt12="100000", faturamento="10000", anexo="I", competencia="2024-01"):
        return DASCalculationInput(
            trailing_12_month_revenue=Decimal(rbt12),
            gross_monthly_revenue=Decimal(faturamento),
            annex=anexo,
            period=competencia,
        )

    return _make


@pytest.fixture
def irpj_input():
    """Factory for IRPJ inputs with commerce / 2024-01 defaults."""

    def _make(receita="100000", deducoes="0", atividade="comércio", competencia="2024-01", incentivos="0"):
        return IRPJCalculationInput(
            gross_revenue=Decimal(receita),
            deductions=Decimal(deducoes),
            main_activity=atividade,
            period=competencia,
            tax_incentives=Decimal(incentivos),
        )

    return _make
