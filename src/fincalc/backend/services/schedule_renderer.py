"""Plain-text rendering for amortization schedules."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from fincalc.backend.config import ScheduleDisplayConfig, load_settings

from .calculators import AmortizationLine, AmortizationSchedule, format_currency

RULE = "-" * 32
ELLIPSIS = "  ..."
COLUMN_HEADER = "Payment# | Interest | Principal | Remaining Balance"


def _format_line(line: AmortizationLine, symbol: str) -> str:
    return " | ".join(
        (
            f"{line.payment_number:>8}",
            f"{format_currency(line.interest_portion, symbol):>9}",
            f"{format_currency(line.principal_portion, symbol):>9}",
            f"{format_currency(line.remaining_balance, symbol):>17}",
        )
    )


def preview_lines(
    lines: Iterable[AmortizationLine], total: int, leading: int
) -> Iterator[AmortizationLine | None]:
    """Yield the first ``leading`` lines, ``None`` for the gap, then the last line."""

    for line in lines:
        number = line.payment_number
        if number <= leading or number == total:
            yield line
        elif number == leading + 1:
            yield None


def render_amortization_schedule(
    schedule: AmortizationSchedule,
    display: ScheduleDisplayConfig | None = None,
) -> str:
    """Return the printable report for ``schedule``.

    Only the leading rows and the final payment are listed; the rows in
    between collapse into a single ellipsis line.
    """

    display = display or load_settings().schedule_display
    symbol = display.currency_symbol

    output = [
        "===== Loan Amortization Schedule =====",
        f"Principal: {format_currency(schedule.principal, symbol)}",
        f"Interest Rate: {schedule.annual_rate * 100:.2f}%",
        f"Term: {schedule.term_years} years",
        f"Monthly Payment: {format_currency(schedule.monthly_payment, symbol)}",
        RULE,
        COLUMN_HEADER,
        RULE,
    ]

    for line in preview_lines(schedule, len(schedule), display.leading_rows):
        output.append(ELLIPSIS if line is None else _format_line(line, symbol))

    output.append(RULE)
    return "\n".join(output)


__all__ = ["preview_lines", "render_amortization_schedule"]
