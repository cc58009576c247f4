"""Annual tax regime simulator.

Compares Simples Nacional, Lucro Presumido and Lucro Real on annual
figures and recommends the cheapest applicable regime.
"""

from decimal import Decimal

from contabilidade_pro.core.calculators.das import effective_rate, split_by_tax
from contabilidade_pro.core.calculators.irpj import irpj_surtax
from contabilidade_pro.core.models.enums import Anexo, Regime
from contabilidade_pro.core.models.simulation import (
    RegimeComparison,
    RegimeSimulation,
    RegimeSimulationInput,
)
from contabilidade_pro.core.rules.simples_tables import find_bracket
from contabilidade_pro.core.rules.tax_constants import (
    ALIQUOTA_COFINS_CUMULATIVO,
    ALIQUOTA_COFINS_NAO_CUMULATIVO,
    ALIQUOTA_CPP,
    ALIQUOTA_CSLL,
    ALIQUOTA_IRPJ,
    ALIQUOTA_PIS_CUMULATIVO,
    ALIQUOTA_PIS_NAO_CUMULATIVO,
    LIMITE_ADICIONAL_IRPJ_ANUAL,
    LIMITE_LUCRO_PRESUMIDO,
    LIMITE_SIMPLES_NACIONAL,
    obter_percentual_presuncao,
)
from contabilidade_pro.shared.exceptions import InvalidRevenueError, SimulationError
from contabilidade_pro.shared.formatters import format_currency
from contabilidade_pro.shared.money import ZERO, round_currency, round_rate

CEM = Decimal("100")


def determine_annex(atividade: str) -> Anexo:
    """Pick a Simples Nacional annex from the activity text (simplified)."""
    texto = atividade.lower()
    if "comércio" in texto or "comercio" in texto or "indústria" in texto or "industria" in texto:
        return Anexo.I
    if "serviço" in texto or "servico" in texto:
        return Anexo.III
    return Anexo.I


class RegimeSimulator:
    """Simulates the annual tax burden of each requested regime."""

    def __init__(self, data: RegimeSimulationInput):
        self.data = data
        self.revenue = data.annual_revenue

    def run(self) -> RegimeComparison:
        """Simulate every requested regime and build the recommendation."""
        if self.revenue <= 0:
            raise InvalidRevenueError("annual revenue must be positive")

        if not self.data.regimes:
            raise SimulationError("at least one regime must be selected")

        simulators = {
            Regime.SIMPLES_NACIONAL: self._simples_nacional,
            Regime.LUCRO_PRESUMIDO: self._lucro_presumido,
            Regime.LUCRO_REAL: self._lucro_real,
        }
        # dict.fromkeys drops repeated regimes, keeping request order
        simulations = [simulators[regime]() for regime in dict.fromkeys(self.data.regimes)]

        # Applicable regimes first, cheapest first
        simulations.sort(key=lambda s: (not s.applicable, s.total_tax))
        return self._recommend(simulations)

    def _result(self, regime: Regime, details: dict[str, Decimal], **kwargs) -> RegimeSimulation:
        rounded = {nome: round_currency(valor) for nome, valor in details.items()}
        total = round_currency(sum(rounded.values(), ZERO))
        return RegimeSimulation(
            regime=regime,
            total_tax=total,
            effective_rate=round_rate(total / self.revenue * CEM),
            details=rounded,
            **kwargs,
        )

    def _simples_nacional(self) -> RegimeSimulation:
        if self.revenue > LIMITE_SIMPLES_NACIONAL:
            return RegimeSimulation(
                regime=Regime.SIMPLES_NACIONAL,
                applicable=False,
                reason_not_applicable=(
                    f"Receita anual excede {format_currency(LIMITE_SIMPLES_NACIONAL)}"
                ),
            )

        anexo = determine_annex(self.data.main_activity)
        bracket = find_bracket(anexo, self.revenue)
        total = round_currency(self.revenue * effective_rate(self.revenue, bracket) / CEM)

        return RegimeSimulation(
            regime=Regime.SIMPLES_NACIONAL,
            total_tax=total,
            effective_rate=round_rate(total / self.revenue * CEM),
            details=split_by_tax(total, bracket),
            advantages=[
                "Tributação simplificada em guia única",
                "Menor burocracia",
                "Dispensa de algumas obrigações acessórias",
                "Alíquotas reduzidas",
            ],
            disadvantages=[
                "Limitação de receita anual",
                "Restrições de atividades",
                "Não permite aproveitamento de créditos",
            ],
        )

    def _lucro_presumido(self) -> RegimeSimulation:
        if self.revenue > LIMITE_LUCRO_PRESUMIDO:
            return RegimeSimulation(
                regime=Regime.LUCRO_PRESUMIDO,
                applicable=False,
                reason_not_applicable=(
                    f"Receita anual excede {format_currency(LIMITE_LUCRO_PRESUMIDO)}"
                ),
            )

        presuncao = obter_percentual_presuncao(self.data.main_activity)
        lucro_presumido = self.revenue * presuncao / CEM

        return self._result(
            Regime.LUCRO_PRESUMIDO,
            {
                "irpj": lucro_presumido * ALIQUOTA_IRPJ
                + irpj_surtax(lucro_presumido, LIMITE_ADICIONAL_IRPJ_ANUAL),
                "csll": lucro_presumido * ALIQUOTA_CSLL,
                "pis": self.revenue * ALIQUOTA_PIS_CUMULATIVO,
                "cofins": self.revenue * ALIQUOTA_COFINS_CUMULATIVO,
                "cpp": self.data.payroll * ALIQUOTA_CPP,
            },
            advantages=[
                "Simplicidade no cálculo",
                "Tributação sobre lucro presumido",
                "Menor complexidade contábil",
            ],
            disadvantages=[
                "Tributação mesmo com prejuízo",
                "Não permite aproveitamento total de créditos",
                "Limitação de receita",
            ],
        )

    def _lucro_real(self) -> RegimeSimulation:
        lucro_real = max(ZERO, self.revenue - self.data.operating_expenses)

        return self._result(
            Regime.LUCRO_REAL,
            {
                "irpj": lucro_real * ALIQUOTA_IRPJ
                + irpj_surtax(lucro_real, LIMITE_ADICIONAL_IRPJ_ANUAL),
                "csll": lucro_real * ALIQUOTA_CSLL,
                "pis": self.revenue * ALIQUOTA_PIS_NAO_CUMULATIVO,
                "cofins": self.revenue * ALIQUOTA_COFINS_NAO_CUMULATIVO,
                "cpp": self.data.payroll * ALIQUOTA_CPP,
            },
            advantages=[
                "Tributação sobre lucro efetivo",
                "Aproveitamento integral de créditos",
                "Sem limitação de receita",
                "Compensação de prejuízos",
            ],
            disadvantages=[
                "Maior complexidade contábil",
                "Mais obrigações acessórias",
                "Custos contábeis maiores",
            ],
        )

    def _recommend(self, simulations: list[RegimeSimulation]) -> RegimeComparison:
        aplicaveis = [s for s in simulations if s.applicable]
        if not aplicaveis:
            return RegimeComparison(
                simulations=simulations,
                justification="Nenhum dos regimes simulados é aplicável a esta receita.",
            )

        melhor = aplicaveis[0]
        mais_caro = aplicaveis[-1]
        economia = mais_caro.total_tax - melhor.total_tax
        percentual = (
            round_currency(economia / mais_caro.total_tax * CEM)
            if mais_caro.total_tax > 0
            else ZERO
        )

        justificativa = (
            f"O regime {melhor.regime.value} apresenta a menor carga tributária"
        )
        if len(aplicaveis) > 1:
            justificativa += (
                f", resultando em uma economia de {format_currency(economia)} "
                f"({percentual:.1f}%) em comparação com a opção mais onerosa"
            )
        justificativa += "."
        if melhor.advantages:
            justificativa += f" {melhor.advantages[0]}."

        return RegimeComparison(
            simulations=simulations,
            recommended=melhor.regime,
            annual_savings=economia,
            savings_percentage=percentual,
            justification=justificativa,
        )


def simulate_regimes(data: RegimeSimulationInput) -> RegimeComparison:
    """Compare the annual tax burden of the requested regimes.

    Raises:
        InvalidRevenueError: annual revenue not positive
        SimulationError: no regime requested
    """
    return RegimeSimulator(data).run()
