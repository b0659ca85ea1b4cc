"""Investment return calculators."""

from __future__ import annotations

from .compound import compound_interest
from .utils import round_currency


def calculate_investment_return(
    principal: float,
    annual_rate: float,
    term_years: float,
    apply_tax: bool = False,
    tax_rate: float = 0.0,
) -> float:
    """Return the final value of ``principal`` after annual compounding.

    When ``apply_tax`` is set, ``tax_rate`` is levied on the gain only.
    """

    total_return = compound_interest(principal, annual_rate, term_years)

    if apply_tax:
        tax_amount = (total_return - principal) * tax_rate
        total_return -= tax_amount

    return round_currency(total_return)


def calculate_after_tax_return(
    principal: float, annual_rate: float, term_years: float, tax_rate: float
) -> float:
    """Return the compounded value net of tax on the gain."""

    return calculate_investment_return(
        principal, annual_rate, term_years, apply_tax=True, tax_rate=tax_rate
    )


__all__ = ["calculate_after_tax_return", "calculate_investment_return"]
