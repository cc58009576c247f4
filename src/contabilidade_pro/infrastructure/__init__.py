"""Infrastructure adapters (reports)."""
