"""Command-line interface for ContabilidadePRO."""
