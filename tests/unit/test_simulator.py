"""Tests for the tax regime simulator."""

from decimal import Decimal

import pytest

from contabilidade_pro.core.calculators.simulator import (
    RegimeSimulator,
    determine_annex,
    simulate_regimes,
)
from contabilidade_pro.core.models import Anexo, Regime, RegimeSimulationInput
from contabilidade_pro.shared.exceptions import InvalidRevenueError, SimulationError


@pytest.fixture
def comercio_1mi() -> RegimeSimulationInput:
    """Commerce company with R$ 1 mi revenue."""
    return RegimeSimulationInput(
        annual_revenue=Decimal("1000000"),
        main_activity="comércio varejista",
        payroll=Decimal("100000"),
        operating_expenses=Decimal("800000"),
    )


class TestRegimeSimulations:
    """Annual burden of each regime."""

    def test_simples_nacional(self, comercio_1mi):
        """Annex I, bracket 4: effective 8,45%."""
        comparison = simulate_regimes(comercio_1mi)
        simples = next(s for s in comparison.simulations if s.regime == Regime.SIMPLES_NACIONAL)

        assert simples.total_tax == Decimal("84500.00")
        assert simples.effective_rate == Decimal("8.45")
        assert simples.details["icms"] == Decimal("28307.50")

    def test_lucro_presumido(self, comercio_1mi):
        """8% presumption, no adicional under R$ 240.000."""
        comparison = simulate_regimes(comercio_1mi)
        presumido = next(s for s in comparison.simulations if s.regime == Regime.LUCRO_PRESUMIDO)

        assert presumido.details == {
            "irpj": Decimal("12000.00"),
            "csll": Decimal("7200.00"),
            "pis": Decimal("6500.00"),
            "cofins": Decimal("30000.00"),
            "cpp": Decimal("20000.00"),
        }
        assert presumido.total_tax == Decimal("75700.00")

    def test_lucro_real(self, comercio_1mi):
        """Tax on revenue minus expenses plus non-cumulative PIS/COFINS."""
        comparison = simulate_regimes(comercio_1mi)
        real = next(s for s in comparison.simulations if s.regime == Regime.LUCRO_REAL)

        assert real.details["irpj"] == Decimal("30000.00")
        assert real.details["csll"] == Decimal("18000.00")
        assert real.total_tax == Decimal("160500.00")

    def test_lucro_real_with_loss_has_no_income_tax(self):
        """Expenses above revenue zero IRPJ and CSLL."""
        comparison = simulate_regimes(
            RegimeSimulationInput(
                annual_revenue=Decimal("500000"),
                operating_expenses=Decimal("900000"),
                regimes=[Regime.LUCRO_REAL],
            )
        )
        real = comparison.simulations[0]

        assert real.details["irpj"] == Decimal("0")
        assert real.details["csll"] == Decimal("0")

    def test_adicional_over_annual_limit(self):
        """Presumed profit above R$ 240.000/year pays the 10% adicional."""
        comparison = simulate_regimes(
            RegimeSimulationInput(
                annual_revenue=Decimal("2000000"),
                main_activity="serviços",
                regimes=[Regime.LUCRO_PRESUMIDO],
            )
        )
        # 32% of 2 mi = 640.000; 15% + 10% over 400.000
        assert comparison.simulations[0].details["irpj"] == Decimal("136000.00")


class TestRecommendation:
    """Ordering and recommendation."""

    def test_sorted_by_total_tax(self, comercio_1mi):
        """Cheapest first."""
        comparison = simulate_regimes(comercio_1mi)
        totals = [s.total_tax for s in comparison.simulations]
        assert totals == sorted(totals)

    def test_recommends_cheapest(self, comercio_1mi):
        """Lucro Presumido is cheapest here."""
        comparison = simulate_regimes(comercio_1mi)

        assert comparison.recommended == Regime.LUCRO_PRESUMIDO
        assert comparison.annual_savings == Decimal("84800.00")
        assert comparison.savings_percentage == Decimal("52.83")
        assert "Lucro Presumido" in comparison.justification

    def test_simples_not_applicable_above_ceiling(self):
        """Revenue above R$ 4,8 mi rules out the Simples Nacional."""
        comparison = simulate_regimes(
            RegimeSimulationInput(annual_revenue=Decimal("5000000"), main_activity="comércio")
        )
        simples = next(s for s in comparison.simulations if s.regime == Regime.SIMPLES_NACIONAL)

        assert simples.applicable is False
        assert "4.800.000" in simples.reason_not_applicable
        assert comparison.simulations[-1] == simples
        assert comparison.recommended != Regime.SIMPLES_NACIONAL

    def test_no_applicable_regime(self):
        """Nothing recommended when no simulated regime applies."""
        comparison = simulate_regimes(
            RegimeSimulationInput(
                annual_revenue=Decimal("5000000"),
                regimes=[Regime.SIMPLES_NACIONAL],
            )
        )

        assert comparison.recommended is None
        assert comparison.annual_savings == Decimal("0")

    def test_single_regime(self):
        """One applicable regime is recommended with no savings."""
        comparison = simulate_regimes(
            RegimeSimulationInput(annual_revenue=Decimal("100000"), regimes=[Regime.LUCRO_REAL])
        )

        assert comparison.recommended == Regime.LUCRO_REAL
        assert comparison.annual_savings == Decimal("0")

    def test_repeated_regimes_simulated_once(self):
        """Duplicated regimes do not duplicate simulations."""
        comparison = RegimeSimulator(
            RegimeSimulationInput(
                annual_revenue=Decimal("100000"),
                regimes=[Regime.LUCRO_REAL, Regime.LUCRO_REAL],
            )
        ).run()
        assert len(comparison.simulations) == 1


class TestSimulatorValidation:
    """Input validation."""

    def test_rejects_zero_revenue(self):
        """Annual revenue must be positive."""
        with pytest.raises(InvalidRevenueError):
            simulate_regimes(RegimeSimulationInput(annual_revenue=Decimal("0")))

    def test_rejects_empty_regimes(self):
        """At least one regime is required."""
        with pytest.raises(SimulationError):
            simulate_regimes(RegimeSimulationInput(annual_revenue=Decimal("1000"), regimes=[]))


class TestDetermineAnnex:
    """Annex chosen from the activity."""

    def test_commerce_and_industry(self):
        """Commerce and industry map to Annex I."""
        assert determine_annex("Comércio de roupas") == Anexo.I
        assert determine_annex("indústria") == Anexo.I

    def test_services(self):
        """Services map to Annex III."""
        assert determine_annex("serviços de limpeza") == Anexo.III

    def test_default(self):
        """Unknown activities default to Annex I."""
        assert determine_annex("") == Anexo.I
