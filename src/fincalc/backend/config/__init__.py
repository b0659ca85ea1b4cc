"""Calculator defaults: schema, loader and validation helpers."""

from .schema import (
    DEFAULT_ANNUAL_RATE,
    DEFAULT_TAX_RATE,
    DEFAULT_TERM_YEARS,
    MONTHS_PER_YEAR,
    CalculatorSettings,
    ConfigurationError,
    ScheduleDisplayConfig,
    TaxRateValidationError,
    ensure_valid_tax_rate,
)
from .settings import load_settings, load_settings_file, resolve_settings_path

__all__ = [
    "CalculatorSettings",
    "ConfigurationError",
    "DEFAULT_ANNUAL_RATE",
    "DEFAULT_TAX_RATE",
    "DEFAULT_TERM_YEARS",
    "MONTHS_PER_YEAR",
    "ScheduleDisplayConfig",
    "TaxRateValidationError",
    "ensure_valid_tax_rate",
    "load_settings",
    "load_settings_file",
    "resolve_settings_path",
]
