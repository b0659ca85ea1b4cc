"""Annual compound growth."""

from __future__ import annotations


def compound_interest(principal: float, annual_rate: float, term_years: float) -> float:
    """Return ``principal`` grown at ``annual_rate`` compounded once per year.

    The result is unrounded. A zero term returns ``principal`` unchanged; rates
    below ``-1`` are not validated and yield whatever ``**`` produces.
    """

    return principal * (1 + annual_rate) ** term_years


__all__ = ["compound_interest"]
