"""Main Typer application for ContabilidadePRO."""

import logging
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError
from rich.panel import Panel
from rich.table import Table

from contabilidade_pro import __version__
from contabilidade_pro.cli.console import configure_logging, console, print_error, print_success, print_warning
from contabilidade_pro.config import LOG_LEVELS, get_settings
from contabilidade_pro.core.calculators import calculate_das, calculate_irpj, calculate_mei, simulate_regimes
from contabilidade_pro.core.models import (
    Anexo,
    AtividadeMEI,
    DASCalculationInput,
    IRPJCalculationInput,
    MEICalculationInput,
    Regime,
    RegimeSimulationInput,
)
from contabilidade_pro.core.models.das import DASCalculationResult
from contabilidade_pro.core.models.irpj import IRPJCalculationResult
from contabilidade_pro.core.rules import lookup
from contabilidade_pro.shared.exceptions import ContabilidadeProError
from contabilidade_pro.shared.formatters import format_currency, format_date, format_percentage

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="contabil",
    help="Cálculos fiscais: DAS, IRPJ/CSLL, DAS-MEI e simulação de regimes",
    add_completion=True,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"ContabilidadePRO v{__version__}")
        raise typer.Exit()


def parse_amount(value: str) -> Decimal:
    """Parse "1234.56", "1.234,56" or "1234,56" into a Decimal."""
    texto = value.strip().replace("R$", "").replace(" ", "")
    if "," in texto:
        texto = texto.replace(".", "").replace(",", ".")
    try:
        return Decimal(texto)
    except InvalidOperation:
        raise typer.BadParameter(f"valor monetário inválido: {value!r}") from None


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-v",
            help="Mostra a versão e sai",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="Nível de log (DEBUG, INFO, WARNING...)"),
    ] = None,
) -> None:
    """ContabilidadePRO - cálculos fiscais para empresas brasileiras."""
    try:
        level = log_level.strip().upper() if log_level is not None else get_settings().log_level
    except ValidationError as e:
        print_error(f"configuração inválida: {e}")
        raise typer.Exit(1)

    if level not in LOG_LEVELS:
        print_error(f"nível de log inválido: {log_level!r} (use um de {', '.join(sorted(LOG_LEVELS))})")
        raise typer.Exit(1)

    configure_logging(level)


def _write_pdf(
    result: DASCalculationResult | IRPJCalculationResult,
    pdf: Path,
    cnpj: Optional[str],
) -> None:
    from contabilidade_pro.infrastructure.reports import REPORTLAB_AVAILABLE, generate_calculation_report

    if not REPORTLAB_AVAILABLE:
        print_error(
            "ReportLab não está instalado. "
            "Instale com: pip install 'contabilidade-pro[pdf]'"
        )
        raise typer.Exit(1)

    if not pdf.is_absolute() and pdf.parent == Path("."):
        pdf = get_settings().report_dir / pdf

    generate_calculation_report(result, pdf, cnpj=cnpj)
    print_success(f"Relatório gerado: {pdf}")


@app.command()
def das(
    rbt12: Annotated[str, typer.Option("--rbt12", help="Receita bruta dos últimos 12 meses")],
    faturamento: Annotated[str, typer.Option("--faturamento", "-f", help="Receita bruta do mês")],
    competencia: Annotated[str, typer.Option("--competencia", "-c", help="Competência (YYYY-MM)")],
    anexo: Annotated[
        Optional[str],
        typer.Option("--anexo", "-a", help="Anexo do Simples Nacional (I a V)"),
    ] = None,
    json_output: Annotated[bool, typer.Option("--json", help="Saída em JSON")] = False,
    pdf: Annotated[Optional[Path], typer.Option("--pdf", help="Gera memória de cálculo em PDF")] = None,
    cnpj: Annotated[Optional[str], typer.Option("--cnpj", help="CNPJ para o cabeçalho do PDF (com --pdf)")] = None,
) -> None:
    """Calcula o DAS mensal do Simples Nacional."""
    try:
        data = DASCalculationInput(
            trailing_12_month_revenue=parse_amount(rbt12),
            gross_monthly_revenue=parse_amount(faturamento),
            annex=anexo or get_settings().default_annex.value,
            period=competencia,
        )
        result = calculate_das(data)
        logger.debug("DAS calculado: %s", result.model_dump())

        if json_output:
            console.print_json(result.model_dump_json())
        else:
            _display_das(result)

        if pdf is not None:
            _write_pdf(result, pdf, cnpj)
        elif cnpj is not None:
            print_warning("--cnpj ignorado: o CNPJ só é usado no relatório gerado com --pdf")

    except (ContabilidadeProError, ValidationError) as e:
        print_error(str(e))
        raise typer.Exit(1)


@app.command()
def irpj(
    receita: Annotated[str, typer.Option("--receita", "-r", help="Receita bruta do período")],
    atividade: Annotated[str, typer.Option("--atividade", help="Atividade principal")],
    competencia: Annotated[str, typer.Option("--competencia", "-c", help="Competência (YYYY-MM)")],
    deducoes: Annotated[str, typer.Option("--deducoes", "-d", help="Deduções da receita")] = "0",
    incentivos: Annotated[str, typer.Option("--incentivos", help="Incentivos fiscais")] = "0",
    json_output: Annotated[bool, typer.Option("--json", help="Saída em JSON")] = False,
    pdf: Annotated[Optional[Path], typer.Option("--pdf", help="Gera memória de cálculo em PDF")] = None,
    cnpj: Annotated[Optional[str], typer.Option("--cnpj", help="CNPJ para o cabeçalho do PDF (com --pdf)")] = None,
) -> None:
    """Calcula IRPJ e CSLL pelo Lucro Presumido."""
    try:
        data = IRPJCalculationInput(
            gross_revenue=parse_amount(receita),
            deductions=parse_amount(deducoes),
            main_activity=atividade,
            period=competencia,
            tax_incentives=parse_amount(incentivos),
        )
        result = calculate_irpj(data)
        logger.debug("IRPJ calculado: %s", result.model_dump())

        if json_output:
            console.print_json(result.model_dump_json())
        else:
            _display_irpj(result)

        if pdf is not None:
            _write_pdf(result, pdf, cnpj)
        elif cnpj is not None:
            print_warning("--cnpj ignorado: o CNPJ só é usado no relatório gerado com --pdf")

    except (ContabilidadeProError, ValidationError) as e:
        print_error(str(e))
        raise typer.Exit(1)


@app.command()
def mei(
    receita: Annotated[str, typer.Option("--receita", "-r", help="Receita bruta do mês")],
    atividade: Annotated[AtividadeMEI, typer.Option("--atividade", help="Grupo de atividade MEI")],
    competencia: Annotated[str, typer.Option("--competencia", "-c", help="Competência (YYYY-MM)")],
    json_output: Annotated[bool, typer.Option("--json", help="Saída em JSON")] = False,
) -> None:
    """Calcula a DAS-MEI mensal."""
    try:
        result = calculate_mei(
            MEICalculationInput(
                monthly_revenue=parse_amount(receita),
                activity=atividade,
                period=competencia,
            )
        )
    except (ContabilidadeProError, ValidationError) as e:
        print_error(str(e))
        raise typer.Exit(1)

    if json_output:
        console.print_json(result.model_dump_json())
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Composição")
    table.add_column("Valor", justify="right", style="currency")
    table.add_row("INSS", format_currency(result.inss))
    if result.icms > 0:
        table.add_row("ICMS", format_currency(result.icms))
    if result.iss > 0:
        table.add_row("ISS", format_currency(result.iss))
    table.add_row("[bold]Total DAS-MEI[/bold]", f"[bold]{format_currency(result.monthly_amount)}[/bold]")

    console.print()
    console.print(
        Panel.fit(
            f"[header]Competência:[/header] {result.period}\n"
            f"[header]Atividade:[/header] {result.activity.value}\n"
            f"[header]Vencimento:[/header] {format_date(result.due_date)}\n"
            f"[header]Projeção anual:[/header] {format_currency(result.projected_annual_revenue)} "
            f"({format_percentage(result.limit_usage_percentage, decimals=1)} do limite)",
            title="DAS-MEI",
            border_style="blue",
        )
    )
    console.print(table)

    if result.limit_exceeded:
        print_warning("Limite anual do MEI excedido. Considere migrar para outro regime tributário.")


@app.command()
def simular(
    receita: Annotated[str, typer.Option("--receita", "-r", help="Receita bruta anual")],
    atividade: Annotated[str, typer.Option("--atividade", help="Atividade principal")] = "",
    folha: Annotated[str, typer.Option("--folha", help="Folha salarial anual")] = "0",
    despesas: Annotated[str, typer.Option("--despesas", help="Despesas operacionais anuais")] = "0",
    regimes: Annotated[
        Optional[list[Regime]],
        typer.Option("--regime", help="Regime a comparar (repita a opção para vários)"),
    ] = None,
    json_output: Annotated[bool, typer.Option("--json", help="Saída em JSON")] = False,
) -> None:
    """Compara a carga tributária anual entre regimes."""
    try:
        comparison = simulate_regimes(
            RegimeSimulationInput(
                annual_revenue=parse_amount(receita),
                main_activity=atividade,
                payroll=parse_amount(folha),
                operating_expenses=parse_amount(despesas),
                regimes=regimes or list(Regime),
            )
        )
    except (ContabilidadeProError, ValidationError) as e:
        print_error(str(e))
        raise typer.Exit(1)

    if json_output:
        console.print_json(comparison.model_dump_json())
        return

    table = Table(show_header=True, header_style="bold", title="Simulação de Regimes")
    table.add_column("Regime", style="cyan")
    table.add_column("Imposto anual", justify="right")
    table.add_column("Alíquota efetiva", justify="right")
    table.add_column("Observação")

    for sim in comparison.simulations:
        if sim.applicable:
            table.add_row(
                sim.regime.value,
                format_currency(sim.total_tax),
                format_percentage(sim.effective_rate),
                "[success]recomendado[/success]" if sim.regime == comparison.recommended else "",
            )
        else:
            table.add_row(sim.regime.value, "-", "-", f"[muted]{sim.reason_not_applicable}[/muted]")

    console.print()
    console.print(table)
    console.print()
    console.print(comparison.justification)


@app.command()
def tabela(
    anexo: Annotated[Anexo, typer.Argument(help="Anexo do Simples Nacional (I a V)")],
) -> None:
    """Mostra a tabela de faixas de um anexo do Simples Nacional."""
    table = Table(show_header=True, header_style="bold", title=f"Anexo {anexo.value}")
    table.add_column("Faixa", justify="center")
    table.add_column("Receita em 12 meses até", justify="right")
    table.add_column("Alíquota nominal", justify="right")
    table.add_column("Parcela a deduzir", justify="right")

    for bracket in lookup(anexo):
        table.add_row(
            str(bracket.faixa),
            format_currency(bracket.upper_bound),
            format_percentage(bracket.nominal_rate),
            format_currency(bracket.deduction),
        )

    console.print(table)


def _display_das(result: DASCalculationResult) -> None:
    console.print()
    console.print(
        Panel.fit(
            f"[header]Competência:[/header] {result.period}\n"
            f"[header]Anexo:[/header] {result.annex.value} (faixa {result.bracket_used.faixa})\n"
            f"[header]RBT12:[/header] {format_currency(result.trailing_12_month_revenue)}\n"
            f"[header]Alíquota nominal:[/header] {format_percentage(result.nominal_rate)}\n"
            f"[header]Alíquota efetiva:[/header] {format_percentage(result.effective_rate, decimals=4)}\n"
            f"[header]Vencimento:[/header] {format_date(result.due_date)}",
            title="DAS - Simples Nacional",
            border_style="blue",
        )
    )

    table = Table(show_header=True, header_style="bold")
    table.add_column("Tributo")
    table.add_column("Valor", justify="right", style="currency")
    for tributo, valor in result.breakdown.items():
        table.add_row(tributo.upper(), format_currency(valor))
    table.add_row("[bold]Total DAS[/bold]", f"[bold]{format_currency(result.tax_amount)}[/bold]")
    console.print(table)


def _display_irpj(result: IRPJCalculationResult) -> None:
    table = Table(show_header=True, header_style="bold", title="IRPJ/CSLL - Lucro Presumido")
    table.add_column("Item")
    table.add_column("Valor", justify="right")

    table.add_row("Receita líquida", format_currency(result.net_revenue))
    table.add_row("Presunção", format_percentage(result.presumption_percentage, decimals=1))
    table.add_row("Base de cálculo", format_currency(result.base_amount))
    table.add_row("IRPJ (15%)", format_currency(result.normal_tax))
    table.add_row("Adicional (10%)", format_currency(result.surtax))
    table.add_row("CSLL (9%)", format_currency(result.csll))
    if result.tax_incentives > 0:
        table.add_row("Incentivos fiscais", format_currency(-result.tax_incentives))
    table.add_row("[bold]Valor a recolher[/bold]", f"[bold]{format_currency(result.amount_due)}[/bold]")
    table.add_row("Vencimento", format_date(result.due_date))

    console.print()
    console.print(table)
