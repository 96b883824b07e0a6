from __future__ import annotations


class ConfigurationError(ValueError):
    """Invalid programmer-supplied chart or controller configuration."""


class ChartDataError(ValueError):
    """Episode data that cannot be turned into a chart."""
