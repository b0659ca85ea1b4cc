"""Utility helpers for calculator modules."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

from fincalc.backend.config.schema import MONTHS_PER_YEAR

_CENT = Decimal("0.01")


def _round_half_away(value: float, step: Decimal) -> float:
    # Non-finite values carry arithmetic faults through to the caller.
    if not math.isfinite(value):
        return value
    return float(Decimal(str(value)).quantize(step, rounding=ROUND_HALF_UP))


def round_currency(value: float) -> float:
    """Round monetary amounts to two decimals, halves away from zero."""

    return _round_half_away(value, _CENT)


def monthly_rate(annual_rate: float) -> float:
    """Convert a nominal annual rate into its monthly equivalent."""

    return annual_rate / MONTHS_PER_YEAR


def total_payments(term_years: int) -> int:
    """Return the number of monthly periods in ``term_years``."""

    return term_years * MONTHS_PER_YEAR


def format_percentage(value: float) -> str:
    """Return a human-readable percentage label for ``value``."""

    percentage = round(value * 100, 6)
    if float(int(percentage)) == percentage:
        return f"{int(percentage)}%"
    return f"{percentage:.2f}%"


def format_currency(value: float, symbol: str = "$") -> str:
    """Render ``value`` with thousands separators and two decimals."""

    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(round_currency(value)):,.2f}"


__all__ = [
    "format_currency",
    "format_percentage",
    "monthly_rate",
    "round_currency",
    "total_payments",
]
