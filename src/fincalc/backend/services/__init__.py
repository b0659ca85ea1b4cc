"""Service-layer helpers for the FinCalc backend."""

from fincalc.backend.config import (
    DEFAULT_ANNUAL_RATE,
    DEFAULT_TERM_YEARS,
    MONTHS_PER_YEAR,
    TaxRateValidationError,
)

from .calculation_service import (
    build_investment_payload,
    build_schedule_payload,
    calculate_after_tax_return,
    calculate_investment_return,
    calculate_loan_payment,
    current_tax_rate,
    generate_amortization_schedule,
    get_defaults,
    set_tax_rate,
)
from .schedule_renderer import render_amortization_schedule
from .state import CalculationClock, CalculationContext, TaxConfiguration

__all__ = [
    "CalculationClock",
    "CalculationContext",
    "DEFAULT_ANNUAL_RATE",
    "DEFAULT_TERM_YEARS",
    "MONTHS_PER_YEAR",
    "TaxConfiguration",
    "TaxRateValidationError",
    "build_investment_payload",
    "build_schedule_payload",
    "calculate_after_tax_return",
    "calculate_investment_return",
    "calculate_loan_payment",
    "current_tax_rate",
    "generate_amortization_schedule",
    "get_defaults",
    "render_amortization_schedule",
    "set_tax_rate",
]
