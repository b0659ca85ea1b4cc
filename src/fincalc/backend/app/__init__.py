"""Application factory for the FinCalc HTTP API."""

from __future__ import annotations

import logging
import os
from warnings import warn

from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import BadRequest

from fincalc.backend.services import CalculationContext

from .http import CONTEXT_EXTENSION, problem_response
from .routes import register_routes
from .routes.config import get_configuration_metadata

_LOGGER = logging.getLogger(__name__)


def _parse_allowed_origins(raw: str | None) -> set[str]:
    """Convert an environment variable into a normalised set of origins."""

    if not raw:
        return set()

    return {origin.strip() for origin in raw.split(",") if origin.strip()}


def create_app(context: CalculationContext | None = None) -> Flask:
    """Create the Flask application bound to ``context``.

    Each application owns its own tax rate and calculation clock unless a
    context is passed in explicitly.
    """

    app = Flask(__name__)
    app.extensions[CONTEXT_EXTENSION] = context or CalculationContext()

    allowed_origins = _parse_allowed_origins(os.getenv("FINCALC_ALLOWED_ORIGINS"))
    if not allowed_origins:
        warn(
            "No allowed origins configured; cross-origin requests will be rejected.",
            stacklevel=1,
        )

    CORS(
        app,
        resources={r"/api/*": {"origins": sorted(allowed_origins)}},
        supports_credentials=False,
        methods=["GET", "OPTIONS", "POST", "PUT"],
        allow_headers=["Content-Type"],
    )

    register_routes(app)

    @app.route("/health", methods=["GET"])
    def health_check():
        """Simple health check endpoint for infrastructure monitoring."""

        payload = {"status": "ok", **get_configuration_metadata()}
        return jsonify(payload)

    @app.errorhandler(BadRequest)
    def handle_bad_request(error: BadRequest):
        """Return consistent JSON responses for malformed payloads."""

        message = error.description or "Invalid request"
        return problem_response("bad_request", status=400, message=message).to_response()

    @app.errorhandler(ValueError)
    def handle_value_error(error: ValueError):
        """Surface input and tax-rate validation errors to clients."""

        return problem_response(
            "validation_error", status=400, message=str(error)
        ).to_response()

    @app.errorhandler(ZeroDivisionError)
    def handle_zero_division(error: ZeroDivisionError):
        """Report loan terms the payment formula cannot evaluate."""

        _LOGGER.warning("Calculation failed with an undefined payment: %s", error)
        return problem_response(
            "undefined_payment",
            status=422,
            message="The payment formula is undefined when the interest rate or term is zero",
        ).to_response()

    @app.errorhandler(OverflowError)
    def handle_overflow(error: OverflowError):
        """Report terms whose growth factor exceeds floating-point range."""

        return problem_response(
            "numeric_overflow", status=422, message=str(error)
        ).to_response()

    return app
