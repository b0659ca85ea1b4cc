"""Typed request models shared by the HTTP routes."""

from .api import (
    InvestmentRequest,
    LoanTermsRequest,
    TaxRateUpdateRequest,
    format_validation_error,
    parse_request,
)

__all__ = [
    "InvestmentRequest",
    "LoanTermsRequest",
    "TaxRateUpdateRequest",
    "format_validation_error",
    "parse_request",
]
