"""Pydantic models describing the public API surface."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

__all__ = [
    "InvestmentRequest",
    "LoanTermsRequest",
    "TaxRateUpdateRequest",
    "format_validation_error",
    "parse_request",
]


def _reject_boolean(value: Any) -> Any:
    # JSON true/false would otherwise coerce to 1.0/0.0.
    if isinstance(value, bool):
        raise ValueError("expected a number")
    return value


class LoanTermsRequest(BaseModel):
    """Principal, rate and term shared by every calculation endpoint.

    Rate and term fall back to the configured defaults when omitted. Ranges are
    deliberately not checked here; the calculators accept any numeric input.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    principal: float
    annual_rate: float | None = None
    term_years: int | None = None

    @field_validator("principal", "annual_rate", mode="before")
    @classmethod
    def _reject_booleans(cls, value: Any) -> Any:
        return _reject_boolean(value)


class InvestmentRequest(LoanTermsRequest):
    """Investment terms with an optional request to tax the gain."""

    apply_tax: bool = False


class TaxRateUpdateRequest(BaseModel):
    """Body accepted by the tax-rate update endpoint."""

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    tax_rate: float

    @field_validator("tax_rate", mode="before")
    @classmethod
    def _reject_booleans(cls, value: Any) -> Any:
        return _reject_boolean(value)


def format_validation_error(error: ValidationError) -> str:
    """Return a concise human-readable description of validation issues."""

    messages: list[str] = []
    for issue in error.errors():
        location = ".".join(str(part) for part in issue.get("loc", ()))
        message = issue.get("msg", "Invalid value")
        if location:
            messages.append(f"{location}: {message}")
        else:
            messages.append(message)

    details = "; ".join(messages) if messages else str(error)
    return f"Invalid calculation payload: {details}"


def parse_request(model: type[BaseModel], payload: Mapping[str, Any]) -> Any:
    """Validate ``payload`` against ``model``, raising ``ValueError`` on failure."""

    try:
        return model.model_validate(dict(payload))
    except ValidationError as exc:
        raise ValueError(format_validation_error(exc)) from exc
