"""REST endpoints for loan and investment calculations."""

from __future__ import annotations

from typing import Any

from flask import Blueprint, Response, jsonify, request

from fincalc.backend.app.http import current_context, read_json_object
from fincalc.backend.app.models import InvestmentRequest, LoanTermsRequest, parse_request
from fincalc.backend.services import (
    build_investment_payload,
    build_schedule_payload,
    calculate_loan_payment,
    generate_amortization_schedule,
    get_defaults,
    render_amortization_schedule,
)

blueprint = Blueprint("calculations", __name__, url_prefix="/api/v1/calculations")


def _resolved_terms(terms: LoanTermsRequest) -> dict[str, Any]:
    defaults = get_defaults()
    return {
        "principal": terms.principal,
        "annual_rate": (
            defaults.default_annual_rate if terms.annual_rate is None else terms.annual_rate
        ),
        "term_years": (
            defaults.default_term_years if terms.term_years is None else terms.term_years
        ),
    }


@blueprint.post("/loan-payment")
def create_loan_payment() -> tuple[Any, int]:
    """Return the fixed monthly payment for the submitted loan terms."""

    terms = parse_request(LoanTermsRequest, read_json_object(request))
    payment = calculate_loan_payment(terms.principal, terms.annual_rate, terms.term_years)

    return jsonify({**_resolved_terms(terms), "monthly_payment": payment}), 200


@blueprint.post("/investment-return")
def create_investment_return() -> tuple[Any, int]:
    """Return the compounded value of an investment, optionally after tax."""

    terms = parse_request(InvestmentRequest, read_json_object(request))
    payload = build_investment_payload(
        terms.principal,
        terms.annual_rate,
        terms.term_years,
        terms.apply_tax,
        context=current_context(),
    )

    return jsonify(payload), 200


@blueprint.post("/after-tax-return")
def create_after_tax_return() -> tuple[Any, int]:
    """Return the compounded value of an investment net of tax on the gain."""

    terms = parse_request(LoanTermsRequest, read_json_object(request))
    payload = build_investment_payload(
        terms.principal,
        terms.annual_rate,
        terms.term_years,
        apply_tax=True,
        context=current_context(),
    )

    return jsonify(payload), 200


@blueprint.post("/amortization-schedule")
def create_amortization_schedule() -> tuple[Any, int] | Response:
    """Return every schedule line as JSON, or the text report with ``format=text``."""

    terms = parse_request(LoanTermsRequest, read_json_object(request))

    if request.args.get("format", "json").strip().lower() == "text":
        schedule = generate_amortization_schedule(
            terms.principal, terms.annual_rate, terms.term_years
        )
        report = render_amortization_schedule(schedule)
        return Response(report + "\n", mimetype="text/plain")

    payload = build_schedule_payload(terms.principal, terms.annual_rate, terms.term_years)
    return jsonify(payload), 200
