"""Public calculation operations backed by the shared defaults and state.

Each operation resolves omitted rate/term arguments against the configured
defaults at call time, then delegates the arithmetic to the calculator modules.
Callers may pass an explicit :class:`CalculationContext`; otherwise the
process-wide context supplies the tax rate and the last-calculation clock.
"""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from time import perf_counter
from typing import Any

from fincalc.backend.config import CalculatorSettings, load_settings

from . import calculators
from .calculators import AmortizationSchedule, round_currency
from .state import CalculationContext, get_default_context

_LOGGER = logging.getLogger(__name__)

_PROFILE_ENV = "FINCALC_PROFILE_CALCULATIONS"


def _profiling_enabled() -> bool:
    """Return ``True`` when calculation profiling should be captured."""

    flag = os.getenv(_PROFILE_ENV, "")
    return flag.strip().lower() in {"1", "true", "yes", "on"}


@contextmanager
def _profile_section(name: str, store: dict[str, float] | None):
    """Capture the duration of a named section when profiling is enabled."""

    if store is None:
        yield
        return

    start = perf_counter()
    try:
        yield
    finally:
        store[name] = perf_counter() - start


def get_defaults() -> CalculatorSettings:
    """Expose the read-only defaults (rate, term, initial tax rate)."""

    return load_settings()


def _resolve_terms(
    annual_rate: float | None, term_years: int | None
) -> tuple[float, int]:
    settings = load_settings()
    rate = settings.default_annual_rate if annual_rate is None else annual_rate
    term = settings.default_term_years if term_years is None else term_years
    return rate, term


def _resolve_context(context: CalculationContext | None) -> CalculationContext:
    return context if context is not None else get_default_context()


def calculate_loan_payment(
    principal: float,
    annual_rate: float | None = None,
    term_years: int | None = None,
) -> float:
    """Return the rounded monthly payment for an amortizing loan."""

    rate, term = _resolve_terms(annual_rate, term_years)
    return calculators.calculate_loan_payment(principal, rate, term)


def build_investment_payload(
    principal: float,
    annual_rate: float | None = None,
    term_years: int | None = None,
    apply_tax: bool = False,
    *,
    context: CalculationContext | None = None,
) -> dict[str, Any]:
    """Compute an investment return and describe the inputs it used.

    The tax rate is read once, when the call starts, and that same value is
    reported under ``tax_rate`` when tax applies. A concurrent update lands
    either entirely before or entirely after this calculation.
    """

    rate, term = _resolve_terms(annual_rate, term_years)
    state = _resolve_context(context)

    payload: dict[str, Any] = {
        "principal": principal,
        "annual_rate": rate,
        "term_years": term,
        "apply_tax": apply_tax,
    }
    if apply_tax:
        tax_rate = state.tax.tax_rate
        payload["tax_rate"] = tax_rate
        total = calculators.calculate_after_tax_return(principal, rate, term, tax_rate)
    else:
        total = calculators.calculate_investment_return(principal, rate, term)

    state.clock.mark()
    payload["total_return"] = total
    return payload


def calculate_investment_return(
    principal: float,
    annual_rate: float | None = None,
    term_years: int | None = None,
    apply_tax: bool = False,
    *,
    context: CalculationContext | None = None,
) -> float:
    """Return the rounded compounded value, optionally net of tax on the gain."""

    payload = build_investment_payload(
        principal, annual_rate, term_years, apply_tax, context=context
    )
    return payload["total_return"]


def calculate_after_tax_return(
    principal: float,
    annual_rate: float | None = None,
    term_years: int | None = None,
    *,
    context: CalculationContext | None = None,
) -> float:
    """Return the compounded value net of tax at the current tax rate."""

    return calculate_investment_return(
        principal, annual_rate, term_years, apply_tax=True, context=context
    )


def generate_amortization_schedule(
    principal: float,
    annual_rate: float | None = None,
    term_years: int | None = None,
) -> AmortizationSchedule:
    """Return the lazy month-by-month schedule for the loan."""

    rate, term = _resolve_terms(annual_rate, term_years)
    return calculators.generate_amortization_schedule(principal, rate, term)


def build_schedule_payload(
    principal: float,
    annual_rate: float | None = None,
    term_years: int | None = None,
) -> dict[str, Any]:
    """Materialise a schedule into a JSON-ready mapping."""

    timings: dict[str, float] | None = {} if _profiling_enabled() else None

    with _profile_section("schedule", timings):
        schedule = generate_amortization_schedule(principal, annual_rate, term_years)
        lines = [line.as_dict() for line in schedule]

    if timings is not None:
        _LOGGER.debug(
            "build_schedule_payload timings (ms): %s",
            {name: round(duration * 1000, 3) for name, duration in timings.items()},
        )

    return {
        "principal": principal,
        "annual_rate": schedule.annual_rate,
        "term_years": schedule.term_years,
        "monthly_payment": schedule.monthly_payment,
        "total_payments": len(schedule),
        "total_interest": round_currency(
            sum(line["interest_portion"] for line in lines)
        ),
        "lines": lines,
    }


def set_tax_rate(rate: float, *, context: CalculationContext | None = None) -> None:
    """Update the shared tax rate; raises ``TaxRateValidationError`` when invalid."""

    _resolve_context(context).tax.set_tax_rate(rate)


def current_tax_rate(*, context: CalculationContext | None = None) -> float:
    """Return the tax rate applied by tax-aware calculations."""

    return _resolve_context(context).tax.tax_rate


__all__ = [
    "build_investment_payload",
    "build_schedule_payload",
    "calculate_after_tax_return",
    "calculate_investment_return",
    "calculate_loan_payment",
    "current_tax_rate",
    "generate_amortization_schedule",
    "get_defaults",
    "set_tax_rate",
]
