"""Expose calculator defaults and the mutable tax rate."""

from __future__ import annotations

from typing import Any

from flask import Blueprint, jsonify, request

from fincalc.backend.app.http import current_context, read_json_object
from fincalc.backend.app.models import TaxRateUpdateRequest, parse_request
from fincalc.backend.services import get_defaults, set_tax_rate
from fincalc.backend.version import get_project_version

blueprint = Blueprint("config", __name__, url_prefix="/api/v1/config")


def get_configuration_metadata() -> dict[str, Any]:
    """Expose runtime metadata shared by the health check and config routes."""

    return {"version": get_project_version()}


@blueprint.get("")
def get_configuration() -> tuple[Any, int]:
    """Return the defaults, current tax rate and last calculation time."""

    defaults = get_defaults()
    context = current_context()
    payload = {
        **get_configuration_metadata(),
        "default_annual_rate": defaults.default_annual_rate,
        "default_term_years": defaults.default_term_years,
        "months_per_year": defaults.months_per_year,
        "tax_rate": context.tax.tax_rate,
        "last_calculation_at": context.clock.last_calculation_at.isoformat(),
    }
    return jsonify(payload), 200


@blueprint.put("/tax-rate")
def update_tax_rate() -> tuple[Any, int]:
    """Replace the tax rate applied to subsequent tax-aware calculations."""

    update = parse_request(TaxRateUpdateRequest, read_json_object(request))
    context = current_context()
    set_tax_rate(update.tax_rate, context=context)
    return jsonify({"tax_rate": context.tax.tax_rate}), 200
