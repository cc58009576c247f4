"""Custom exceptions for ContabilidadePRO."""


class ContabilidadeProError(Exception):
    """Base exception for all ContabilidadePRO errors."""

    pass


class CalculationError(ContabilidadeProError):
    """A fiscal calculation could not be performed."""

    pass


class InvalidRevenueError(CalculationError):
    """A revenue figure is zero or negative."""

    pass


class RevenueLimitExceededError(CalculationError):
    """Trailing-12-month revenue exceeds the Simples Nacional ceiling."""

    pass


class InvalidDeductionError(CalculationError):
    """Deductions (or incentives) are negative."""

    pass


class UnknownAnnexError(CalculationError):
    """Annex identifier has no matching bracket table."""

    pass


class UnknownActivityError(CalculationError):
    """Activity is not one of the MEI activity groups."""

    pass


class InvalidPeriodError(CalculationError):
    """Competence is not a valid YYYY-MM month."""

    pass


class SimulationError(CalculationError):
    """Regime simulation request is not usable."""

    pass


class ReportGenerationError(ContabilidadeProError):
    """Error generating report."""

    pass
