"""Domain-specific calculation helpers."""

from .compound import compound_interest
from .investment import calculate_after_tax_return, calculate_investment_return
from .loan import (
    AmortizationLine,
    AmortizationSchedule,
    calculate_loan_payment,
    generate_amortization_schedule,
)
from .utils import (
    format_currency,
    format_percentage,
    monthly_rate,
    round_currency,
    total_payments,
)

__all__ = [
    "AmortizationLine",
    "AmortizationSchedule",
    "calculate_after_tax_return",
    "calculate_investment_return",
    "calculate_loan_payment",
    "compound_interest",
    "format_currency",
    "format_percentage",
    "generate_amortization_schedule",
    "monthly_rate",
    "round_currency",
    "total_payments",
]
