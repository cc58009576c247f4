"""Report generators for ContabilidadePRO."""

from contabilidade_pro.infrastructure.reports.pdf_generator import (
    REPORTLAB_AVAILABLE,
    CalculationReportGenerator,
    generate_calculation_report,
)

__all__ = [
    "generate_calculation_report",
    "CalculationReportGenerator",
    "REPORTLAB_AVAILABLE",
]
