"""Command-line access to the calculation services."""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

from fincalc.backend.config import ConfigurationError
from fincalc.backend.services import (
    CalculationContext,
    calculate_after_tax_return,
    calculate_investment_return,
    calculate_loan_payment,
    generate_amortization_schedule,
    render_amortization_schedule,
    set_tax_rate,
)
from fincalc.backend.services.calculators import format_currency
from fincalc.backend.version import get_project_version


def run_demo(context: CalculationContext) -> list[str]:
    """Walk through every operation with a fixed set of example inputs."""

    output = [
        "Monthly payment for $100,000 loan: "
        + format_currency(calculate_loan_payment(100_000, 0.045, 30)),
        "Investment return after 10 years: "
        + format_currency(calculate_investment_return(10_000, 0.07, 10, context=context)),
        "After-tax investment return: "
        + format_currency(calculate_after_tax_return(10_000, 0.07, 10, context=context)),
    ]

    set_tax_rate(0.25, context=context)
    output.append(
        "After-tax investment return with new tax rate: "
        + format_currency(calculate_after_tax_return(10_000, 0.07, 10, context=context))
    )
    output.append(render_amortization_schedule(generate_amortization_schedule(25_000, 0.04, 5)))
    return output


def _add_terms(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("principal", type=float, help="Amount borrowed or invested")
    parser.add_argument(
        "--rate",
        type=float,
        default=None,
        help="Annual rate as a decimal fraction (defaults to the configured rate)",
    )
    parser.add_argument(
        "--term",
        type=int,
        default=None,
        help="Term in years (defaults to the configured term)",
    )


def _build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fincalc",
        description="Loan, investment and amortization calculations.",
    )
    parser.add_argument("--version", action="version", version=get_project_version())
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity for calculation diagnostics",
    )
    parser.add_argument(
        "--tax-rate",
        type=float,
        default=None,
        help="Tax rate applied to gains for this invocation",
    )

    commands = parser.add_subparsers(dest="command")
    commands.add_parser("demo", help="Run the bundled example calculations")

    loan = commands.add_parser("loan", help="Monthly payment for an amortizing loan")
    _add_terms(loan)

    invest = commands.add_parser("invest", help="Compounded value of an investment")
    _add_terms(invest)
    invest.add_argument("--after-tax", action="store_true", help="Tax the gain")

    schedule = commands.add_parser("schedule", help="Print the amortization schedule")
    _add_terms(schedule)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the ``fincalc`` console script."""

    parser = _build_argument_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    context = CalculationContext()
    try:
        if args.tax_rate is not None:
            set_tax_rate(args.tax_rate, context=context)

        command = args.command or "demo"
        if command == "demo":
            lines = run_demo(context)
        elif command == "loan":
            payment = calculate_loan_payment(args.principal, args.rate, args.term)
            lines = [f"Monthly payment: {format_currency(payment)}"]
        elif command == "invest":
            total = calculate_investment_return(
                args.principal, args.rate, args.term, args.after_tax, context=context
            )
            lines = [f"Investment return: {format_currency(total)}"]
        else:
            schedule = generate_amortization_schedule(args.principal, args.rate, args.term)
            lines = [render_amortization_schedule(schedule)]
    except ConfigurationError as error:
        print(f"error: {error}")
        return 2
    except ZeroDivisionError:
        print("error: the payment formula is undefined when the interest rate or term is zero")
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    raise SystemExit(main())
