"""Fiscal calculation core: models, statutory tables and calculators."""
