"""Loan payment and amortization schedule calculators."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from .utils import monthly_rate, round_currency, total_payments

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class AmortizationLine:
    """Breakdown of a single monthly payment."""

    payment_number: int
    interest_portion: float
    principal_portion: float
    remaining_balance: float

    def as_dict(self) -> dict[str, float | int]:
        return {
            "payment_number": self.payment_number,
            "interest_portion": self.interest_portion,
            "principal_portion": self.principal_portion,
            "remaining_balance": self.remaining_balance,
        }


def calculate_loan_payment(principal: float, annual_rate: float, term_years: int) -> float:
    """Return the fixed monthly payment that amortizes ``principal``.

    Uses ``P * r(1+r)^n / ((1+r)^n - 1)`` with ``r`` the monthly rate and ``n``
    the number of monthly payments, rounded to cents. A zero rate or a zero
    term makes the denominator zero and raises :class:`ZeroDivisionError`.
    """

    rate = monthly_rate(annual_rate)
    periods = total_payments(term_years)

    if rate == 0 or periods == 0:
        _LOGGER.warning(
            "Loan payment requested at a zero rate or term; the amortization formula is undefined"
        )

    growth = (1 + rate) ** periods
    payment = principal * (rate * growth) / (growth - 1)

    return round_currency(payment)


class AmortizationSchedule:
    """Restartable, lazily evaluated sequence of :class:`AmortizationLine`.

    The monthly payment and rate are fixed when the schedule is created; each
    iteration replays the balance from ``principal``.
    """

    def __init__(self, principal: float, annual_rate: float, term_years: int) -> None:
        self.principal = principal
        self.annual_rate = annual_rate
        self.term_years = term_years
        self.monthly_payment = calculate_loan_payment(principal, annual_rate, term_years)
        self.monthly_rate = monthly_rate(annual_rate)
        self.total_payments = total_payments(term_years)

    def __iter__(self) -> Iterator[AmortizationLine]:
        remaining_balance = self.principal

        for payment_number in range(1, int(self.total_payments) + 1):
            interest_portion = remaining_balance * self.monthly_rate
            principal_portion = self.monthly_payment - interest_portion
            remaining_balance -= principal_portion
            yield AmortizationLine(
                payment_number=payment_number,
                interest_portion=interest_portion,
                principal_portion=principal_portion,
                remaining_balance=remaining_balance,
            )

    def __len__(self) -> int:
        return max(int(self.total_payments), 0)


def generate_amortization_schedule(
    principal: float, annual_rate: float, term_years: int
) -> AmortizationSchedule:
    """Build the month-by-month amortization schedule for a loan."""

    return AmortizationSchedule(principal, annual_rate, term_years)


__all__ = [
    "AmortizationLine",
    "AmortizationSchedule",
    "calculate_loan_payment",
    "generate_amortization_schedule",
]
