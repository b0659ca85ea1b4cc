"""Unit tests for the public calculation operations."""

from __future__ import annotations

from datetime import timedelta

import pytest

from fincalc.backend.config import TaxRateValidationError
from fincalc.backend.services import (
    DEFAULT_ANNUAL_RATE,
    DEFAULT_TERM_YEARS,
    CalculationContext,
    TaxConfiguration,
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
from fincalc.backend.services import calculators


def test_defaults_are_exposed() -> None:
    defaults = get_defaults()

    assert defaults.default_annual_rate == DEFAULT_ANNUAL_RATE == 0.05
    assert defaults.default_term_years == DEFAULT_TERM_YEARS == 5
    assert defaults.months_per_year == 12
    assert current_tax_rate() == 0.20


def test_omitted_rate_and_term_use_defaults() -> None:
    assert calculate_loan_payment(25_000) == calculate_loan_payment(25_000, 0.05, 5)
    assert calculate_loan_payment(25_000, 0.04) == calculate_loan_payment(25_000, 0.04, 5)
    assert calculate_investment_return(1_000) == calculate_investment_return(1_000, 0.05, 5)
    assert len(generate_amortization_schedule(25_000)) == 60


def test_reference_scenarios() -> None:
    assert calculate_loan_payment(100_000, 0.045, 30) == 506.69
    assert calculate_investment_return(10_000, 0.07, 10, False) == 19_671.51
    assert calculate_after_tax_return(10_000, 0.07, 10) == 17_737.21


def test_tax_rate_update_applies_to_later_calculations() -> None:
    set_tax_rate(0.25)

    assert current_tax_rate() == 0.25
    assert calculate_after_tax_return(10_000, 0.07, 10) == 17_253.64


@pytest.mark.parametrize("rate", [-0.1, 1.1, float("nan")])
def test_invalid_tax_rate_is_rejected_and_ignored(rate: float) -> None:
    with pytest.raises(TaxRateValidationError, match="between 0 and 1"):
        set_tax_rate(rate)

    assert current_tax_rate() == 0.20


@pytest.mark.parametrize("rate", [0.0, 1.0])
def test_tax_rate_bounds_are_inclusive(rate: float) -> None:
    set_tax_rate(rate)

    assert current_tax_rate() == rate


def test_explicit_context_is_isolated_from_default(context: CalculationContext) -> None:
    set_tax_rate(0.5, context=context)

    assert current_tax_rate(context=context) == 0.5
    assert current_tax_rate() == 0.20
    assert calculate_after_tax_return(10_000, 0.07, 10, context=context) == 14_835.76


@pytest.mark.parametrize(
    ("principal", "rate", "term"),
    [(10_000, 0.07, 10), (500, 0.0, 3), (25_000, 0.12, 1), (1, 1.0, 2)],
)
def test_after_tax_return_matches_taxed_investment_return(
    principal: float, rate: float, term: int
) -> None:
    assert calculate_after_tax_return(principal, rate, term) == calculate_investment_return(
        principal, rate, term, apply_tax=True
    )


def test_investment_return_increases_with_term() -> None:
    values = [calculate_investment_return(1_000, 0.05, term) for term in range(1, 16)]

    assert all(later > earlier for earlier, later in zip(values, values[1:]))


def test_tax_lowers_returns_only_when_there_is_a_gain() -> None:
    assert calculate_investment_return(10_000, 0.07, 10, True) < calculate_investment_return(
        10_000, 0.07, 10, False
    )
    assert calculate_investment_return(10_000, 0.0, 10, True) == calculate_investment_return(
        10_000, 0.0, 10, False
    )

    set_tax_rate(0.0)
    assert calculate_investment_return(10_000, 0.07, 10, True) == calculate_investment_return(
        10_000, 0.07, 10, False
    )


def test_investment_return_marks_the_clock(context: CalculationContext, fake_clock) -> None:
    started = context.clock.last_calculation_at
    fake_clock.advance(timedelta(minutes=5))

    calculate_investment_return(1_000, 0.05, 2, context=context)

    assert context.clock.last_calculation_at == started + timedelta(minutes=5)


def test_loan_payment_leaves_the_clock_alone(context: CalculationContext, fake_clock) -> None:
    started = context.clock.last_calculation_at
    fake_clock.advance(timedelta(minutes=5))

    calculate_loan_payment(25_000, 0.04, 5)

    assert context.clock.last_calculation_at == started


def test_schedule_payload_lists_every_line() -> None:
    payload = build_schedule_payload(25_000, 0.04, 5)

    assert payload["monthly_payment"] == 460.41
    assert payload["annual_rate"] == 0.04
    assert payload["term_years"] == 5
    assert payload["total_payments"] == 60
    assert len(payload["lines"]) == 60
    assert payload["lines"][-1]["payment_number"] == 60
    assert payload["total_interest"] == pytest.approx(460.41 * 60 - 25_000, abs=1.0)


def test_schedule_payload_uses_defaults() -> None:
    payload = build_schedule_payload(10_000)

    assert payload["annual_rate"] == 0.05
    assert payload["term_years"] == 5


def test_schedule_payload_profiling_logs_timings(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.setenv("FINCALC_PROFILE_CALCULATIONS", "1")

    with caplog.at_level("DEBUG", logger="fincalc.backend.services.calculation_service"):
        build_schedule_payload(10_000, 0.05, 1)

    assert "build_schedule_payload timings" in caplog.text


class _ShiftingTaxConfiguration(TaxConfiguration):
    """Hands out the next queued rate on every read."""

    def __init__(self, *rates: float) -> None:
        super().__init__()
        self._rates = iter(rates)

    @property
    def tax_rate(self) -> float:
        return next(self._rates)


def test_investment_payload_reports_the_tax_rate_it_applied(
    context: CalculationContext,
) -> None:
    shifting = CalculationContext(
        tax=_ShiftingTaxConfiguration(0.20, 0.50), clock=context.clock
    )

    payload = build_investment_payload(10_000, 0.07, 10, True, context=shifting)

    assert payload["tax_rate"] == 0.20
    assert payload["total_return"] == 17_737.21


def test_investment_payload_without_tax_omits_the_rate() -> None:
    payload = build_investment_payload(10_000)

    assert payload == {
        "principal": 10_000,
        "annual_rate": 0.05,
        "term_years": 5,
        "apply_tax": False,
        "total_return": calculate_investment_return(10_000, 0.05, 5),
    }


def test_after_tax_return_uses_the_after_tax_calculator(
    monkeypatch: pytest.MonkeyPatch, context: CalculationContext
) -> None:
    calls: list[tuple[float, ...]] = []
    original = calculators.calculate_after_tax_return

    def _recording(*args: float) -> float:
        calls.append(args)
        return original(*args)

    monkeypatch.setattr(calculators, "calculate_after_tax_return", _recording)

    assert calculate_after_tax_return(10_000, 0.07, 10, context=context) == 17_737.21
    assert calls == [(10_000, 0.07, 10, 0.2)]
