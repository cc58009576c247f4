"""PDF calculation report ("memória de cálculo") generator."""

import logging
from datetime import datetime
from decimal import Decimal
from pathlib import Path
from typing import Optional, Union

try:
    from reportlab.lib import colors
    from reportlab.lib.pagesizes import A4
    from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
    from reportlab.lib.units import cm
    from reportlab.platypus import (
        Paragraph,
        SimpleDocTemplate,
        Spacer,
        Table,
        TableStyle,
    )

    REPORTLAB_AVAILABLE = True
except ImportError:
    REPORTLAB_AVAILABLE = False

from contabilidade_pro import __version__
from contabilidade_pro.core.models.das import DASCalculationResult
from contabilidade_pro.core.models.irpj import IRPJCalculationResult
from contabilidade_pro.shared.exceptions import ReportGenerationError
from contabilidade_pro.shared.formatters import format_currency, format_date, format_percentage
from contabilidade_pro.shared.validators import format_cnpj, validate_cnpj

logger = logging.getLogger(__name__)

CalculationResult = Union[DASCalculationResult, IRPJCalculationResult]

PGDAS_URL = (
    "https://www8.receita.fazenda.gov.br/SimplesNacional/Aplicacoes/ATSPO/pgdas.app/Identificacao"
)


def check_reportlab_available() -> None:
    """Check if reportlab is available, raise if not."""
    if not REPORTLAB_AVAILABLE:
        raise ImportError(
            "ReportLab não está instalado. "
            "Instale com: pip install 'contabilidade-pro[pdf]'"
        )


class CalculationReportGenerator:
    """Generates a one-page PDF report for a DAS or IRPJ calculation."""

    def __init__(
        self,
        result: CalculationResult,
        cnpj: Optional[str] = None,
        razao_social: Optional[str] = None,
    ):
        check_reportlab_available()
        if not isinstance(result, (DASCalculationResult, IRPJCalculationResult)):
            raise ReportGenerationError(
                f"Tipo de cálculo não suportado no relatório: {type(result).__name__}"
            )
        if cnpj is not None and not validate_cnpj(cnpj):
            raise ReportGenerationError(f"CNPJ inválido: {cnpj}")

        self.result = result
        self.cnpj = cnpj
        self.razao_social = razao_social
        self.page_width = A4[0] - 3 * cm
        self.styles = getSampleStyleSheet()
        self._setup_custom_styles()

    def _setup_custom_styles(self) -> None:
        """Setup custom paragraph styles."""
        self.styles.add(
            ParagraphStyle(
                name="ReportTitle",
                parent=self.styles["Heading1"],
                fontSize=18,
                spaceAfter=16,
                textColor=colors.HexColor("#1a365d"),
                alignment=1,  # Center
            )
        )
        self.styles.add(
            ParagraphStyle(
                name="SectionHeader",
                parent=self.styles["Heading2"],
                fontSize=12,
                spaceBefore=16,
                spaceAfter=8,
                textColor=colors.HexColor("#2c5282"),
            )
        )
        self.styles.add(
            ParagraphStyle(
                name="SmallText",
                parent=self.styles["Normal"],
                fontSize=8,
                textColor=colors.gray,
                alignment=1,
            )
        )

    @property
    def is_das(self) -> bool:
        return isinstance(self.result, DASCalculationResult)

    def generate(self, output_path: Path) -> Path:
        """Generate PDF report and save to output_path."""
        doc = SimpleDocTemplate(
            str(output_path),
            pagesize=A4,
            rightMargin=1.5 * cm,
            leftMargin=1.5 * cm,
            topMargin=1.5 * cm,
            bottomMargin=1.5 * cm,
        )

        elements = []
        elements.extend(self._build_header())
        if self.is_das:
            elements.extend(self._build_das_summary())
            elements.extend(self._build_das_breakdown())
        else:
            elements.extend(self._build_irpj_summary())
        elements.extend(self._build_footer())

        try:
            doc.build(elements)
        except OSError as e:
            raise ReportGenerationError(f"Não foi possível gravar {output_path}: {e}") from e

        logger.info("Relatório gerado em %s", output_path)
        return output_path

    def _table(self, rows: list[list[str]]) -> "Table":
        table = Table(rows, colWidths=[self.page_width * 0.6, self.page_width * 0.4])
        table.setStyle(
            TableStyle([
                ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#2c5282")),
                ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                ("FONTSIZE", (0, 0), (-1, -1), 9),
                ("ALIGN", (1, 0), (1, -1), "RIGHT"),
                ("GRID", (0, 0), (-1, -1), 0.5, colors.HexColor("#e2e8f0")),
                ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, colors.HexColor("#f7fafc")]),
            ])
        )
        return table

    def _build_header(self) -> list:
        """Build report header."""
        titulo = "DAS - Simples Nacional" if self.is_das else "IRPJ/CSLL - Lucro Presumido"
        elements = [
            Paragraph("ContabilidadePRO", self.styles["ReportTitle"]),
            Paragraph(f"Memória de cálculo: {titulo}", self.styles["Heading3"]),
        ]

        linhas = [f"<b>Competência:</b> {self.result.period}"]
        if self.razao_social:
            linhas.insert(0, f"<b>Empresa:</b> {self.razao_social}")
        if self.cnpj:
            linhas.insert(1 if self.razao_social else 0, f"<b>CNPJ:</b> {format_cnpj(self.cnpj)}")

        for linha in linhas:
            elements.append(Paragraph(linha, self.styles["Normal"]))
        return elements

    def _build_das_summary(self) -> list:
        r = self.result
        rows = [
            ["Item", "Valor"],
            ["Anexo", r.annex.value],
            ["Faixa", str(r.bracket_used.faixa)],
            ["Receita bruta 12 meses (RBT12)", format_currency(r.trailing_12_month_revenue)],
            ["Receita bruta do mês", format_currency(r.base_amount)],
            ["Alíquota nominal", format_percentage(r.nominal_rate)],
            ["Parcela a deduzir", format_currency(r.deduction)],
            ["Alíquota efetiva", format_percentage(r.effective_rate, decimals=4)],
            ["Valor do DAS", format_currency(r.tax_amount)],
            ["Vencimento", format_date(r.due_date)],
        ]
        return [Paragraph("Resumo do Cálculo", self.styles["SectionHeader"]), self._table(rows)]

    def _build_das_breakdown(self) -> list:
        if not self.result.breakdown:
            return []
        rows = [["Tributo", "Valor"]]
        for tributo, valor in self.result.breakdown.items():
            rows.append([tributo.upper(), format_currency(valor)])
        return [
            Paragraph("Repartição dos Tributos", self.styles["SectionHeader"]),
            self._table(rows),
            Spacer(1, 0.4 * cm),
            Paragraph(
                f"Gere a guia oficial no PGDAS-D: {PGDAS_URL}",
                self.styles["SmallText"],
            ),
        ]

    def _build_irpj_summary(self) -> list:
        r = self.result
        rows = [
            ["Item", "Valor"],
            ["Receita bruta", format_currency(r.gross_revenue)],
            ["Deduções", format_currency(r.deductions)],
            ["Receita líquida", format_currency(r.net_revenue)],
            ["Percentual de presunção", format_percentage(r.presumption_percentage, decimals=1)],
            ["Base de cálculo", format_currency(r.base_amount)],
            ["IRPJ (15%)", format_currency(r.normal_tax)],
            ["Adicional de IRPJ (10%)", format_currency(r.surtax)],
            ["Total IRPJ", format_currency(r.total_tax)],
            ["CSLL (9%)", format_currency(r.csll)],
        ]
        if r.tax_incentives > Decimal("0"):
            rows.append(["Incentivos fiscais", format_currency(-r.tax_incentives)])
        rows.append(["Valor a recolher", format_currency(r.amount_due)])
        rows.append(["Vencimento", format_date(r.due_date)])
        return [Paragraph("Resumo do Cálculo", self.styles["SectionHeader"]), self._table(rows)]

    def _build_footer(self) -> list:
        """Build report footer."""
        return [
            Spacer(1, 1 * cm),
            Paragraph(
                f"Relatório gerado em {datetime.now().strftime('%d/%m/%Y às %H:%M')} "
                f"pelo ContabilidadePRO v{__version__}",
                self.styles["SmallText"],
            ),
            Spacer(1, 0.1 * cm),
            Paragraph(
                "Valores estimados a partir das tabelas vigentes. "
                "Confira a guia oficial antes do pagamento.",
                self.styles["SmallText"],
            ),
        ]


def generate_calculation_report(
    result: CalculationResult,
    output_path: Path,
    cnpj: Optional[str] = None,
    razao_social: Optional[str] = None,
) -> Path:
    """Generate a PDF report for a DAS or IRPJ calculation result."""
    generator = CalculationReportGenerator(result, cnpj=cnpj, razao_social=razao_social)
    return generator.generate(output_path)
