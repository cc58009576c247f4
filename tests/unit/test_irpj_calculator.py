"""Tests for the Lucro Presumido IRPJ/CSLL calculator."""

from datetime import date
from decimal import Decimal

import pytest

from contabilidade_pro.core.calculators.irpj import calculate_irpj
from contabilidade_pro.shared.exceptions import InvalidDeductionError, InvalidRevenueError


class TestIRPJValidation:
    """Input validation."""

    def test_rejects_zero_revenue(self, irpj_input):
        """Gross revenue of zero is rejected."""
        with pytest.raises(InvalidRevenueError):
            calculate_irpj(irpj_input(receita="0"))

    def test_zero_revenue_wins_over_other_fields(self, irpj_input):
        """Zero revenue is reported even with negative deductions."""
        with pytest.raises(InvalidRevenueError):
            calculate_irpj(irpj_input(receita="0", deducoes="-500", atividade="serviços"))

    def test_rejects_negative_revenue(self, irpj_input):
        """Negative revenue is rejected."""
        with pytest.raises(InvalidRevenueError):
            calculate_irpj(irpj_input(receita="-100"))

    def test_rejects_negative_deductions(self, irpj_input):
        """Deductions cannot be negative."""
        with pytest.raises(InvalidDeductionError):
            calculate_irpj(irpj_input(deducoes="-1000"))

    def test_rejects_deductions_above_revenue(self, irpj_input):
        """Deductions larger than the gross revenue would make the tax negative."""
        with pytest.raises(InvalidDeductionError, match="exceed gross revenue"):
            calculate_irpj(irpj_input(receita="100000", deducoes="200000"))

    def test_deductions_equal_to_revenue(self, irpj_input):
        """Deducting the whole revenue leaves nothing to tax."""
        result = calculate_irpj(irpj_input(receita="100000", deducoes="100000"))

        assert result.base_amount == Decimal("0")
        assert result.total_tax == Decimal("0")
        assert result.csll == Decimal("0")
        assert result.amount_due == Decimal("0")

    def test_rejects_negative_incentives(self, irpj_input):
        """Incentives cannot be negative."""
        with pytest.raises(InvalidDeductionError):
            calculate_irpj(irpj_input(incentivos="-1"))


class TestPresumptionPercentage:
    """Presumption percentage chosen from the activity text."""

    @pytest.mark.parametrize(
        "atividade,esperado",
        [
            ("comércio", Decimal("8")),
            ("Indústria de calçados", Decimal("8")),
            ("serviços", Decimal("32")),
            ("serviços de consultoria", Decimal("32")),
            ("CONSULTORIA EMPRESARIAL", Decimal("32")),
            ("Advocacia", Decimal("32")),
            ("transporte de cargas", Decimal("16")),
            ("construção civil", Decimal("16")),
            ("revenda de combustível", Decimal("1.6")),
        ],
    )
    def test_percentage_by_activity(self, irpj_input, atividade, esperado):
        """Keyword match picks the percentage."""
        result = calculate_irpj(irpj_input(atividade=atividade))
        assert result.presumption_percentage == esperado

    def test_commerce_base(self, irpj_input):
        """Commerce: 8% of R$ 100.000."""
        result = calculate_irpj(irpj_input(atividade="comércio"))
        assert result.base_amount == Decimal("8000")

    def test_services_base(self, irpj_input):
        """Services: 32% of R$ 100.000."""
        result = calculate_irpj(irpj_input(atividade="serviços de consultoria"))
        assert result.base_amount == Decimal("32000")


class TestIRPJCalculation:
    """IRPJ normal and adicional."""

    def test_without_surtax(self, irpj_input):
        """Base up to R$ 20.000 pays no adicional."""
        result = calculate_irpj(irpj_input(receita="100000", atividade="comércio"))

        assert result.base_amount == Decimal("8000")
        assert result.normal_tax == Decimal("1200")
        assert result.surtax == Decimal("0")
        assert result.total_tax == Decimal("1200")

    def test_with_surtax(self, irpj_input):
        """Base above R$ 20.000 pays 10% over the excess."""
        result = calculate_irpj(irpj_input(receita="300000", atividade="serviços"))

        assert result.base_amount == Decimal("96000")
        assert result.normal_tax == Decimal("14400")
        assert result.surtax == Decimal("7600")
        assert result.total_tax == Decimal("22000")

    def test_applies_deductions(self, irpj_input):
        """Deductions reduce the revenue before presumption."""
        result = calculate_irpj(irpj_input(receita="100000", deducoes="10000"))

        assert result.base_amount == Decimal("7200")
        assert result.total_tax == Decimal("1080")
        assert result.net_revenue == Decimal("90000")

    def test_invariants(self, irpj_input):
        """total = normal + adicional; normal = 15% of the base."""
        result = calculate_irpj(irpj_input(receita="1234567.89", deducoes="4321.09", atividade="serviços"))

        assert result.total_tax == result.normal_tax + result.surtax
        assert result.normal_tax == (result.base_amount * Decimal("0.15")).quantize(Decimal("0.01"))
        assert result.surtax == max(
            Decimal("0"), (result.base_amount - 20000) * Decimal("0.10")
        ).quantize(Decimal("0.01"))

    def test_money_has_two_decimals(self, irpj_input):
        """All monetary outputs are quantized to centavos."""
        result = calculate_irpj(irpj_input(receita="100001.99", deducoes="1.99"))

        for valor in (result.total_tax, result.base_amount, result.normal_tax, result.surtax, result.csll):
            assert valor.as_tuple().exponent == -2
        assert result.base_amount == Decimal("8000.00")

    def test_repeated_calls_are_identical(self, irpj_input):
        """Same input, same output."""
        data = irpj_input(receita="555555.55", atividade="engenharia")
        assert calculate_irpj(data) == calculate_irpj(data)


class TestCSLLAndAmountDue:
    """CSLL and the final amount after incentives."""

    def test_csll_nine_percent_of_base(self, irpj_input):
        """CSLL is 9% of the presumed base."""
        result = calculate_irpj(irpj_input(receita="300000", atividade="serviços"))

        assert result.csll == Decimal("8640.00")
        assert result.amount_due == Decimal("30640.00")

    def test_incentives_reduce_amount_due(self, irpj_input):
        """Incentives are subtracted from IRPJ + CSLL."""
        result = calculate_irpj(irpj_input(receita="300000", atividade="serviços", incentivos="1000"))

        assert result.amount_due == Decimal("29640.00")
        assert result.total_tax == Decimal("22000")

    def test_amount_due_never_negative(self, irpj_input):
        """Incentives larger than the tax zero the amount due."""
        result = calculate_irpj(irpj_input(incentivos="999999"))
        assert result.amount_due == Decimal("0")


class TestIRPJDueDate:
    """IRPJ due date: last day of the following month."""

    def test_due_date_leap_february(self, irpj_input):
        """2024-01 is due on 2024-02-29."""
        assert calculate_irpj(irpj_input(competencia="2024-01")).due_date == date(2024, 2, 29)

    def test_due_date_common_february(self, irpj_input):
        """2023-01 is due on 2023-02-28."""
        assert calculate_irpj(irpj_input(competencia="2023-01")).due_date == date(2023, 2, 28)

    def test_due_date_december(self, irpj_input):
        """2024-12 rolls into 2025-01-31."""
        assert calculate_irpj(irpj_input(competencia="2024-12")).due_date == date(2025, 1, 31)
