"""ContabilidadePRO - fiscal calculations for Brazilian companies."""

__version__ = "0.1.0"
