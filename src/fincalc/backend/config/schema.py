"""Pydantic models describing the calculator defaults file."""

from __future__ import annotations

from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing_extensions import Self

MONTHS_PER_YEAR: Final[int] = 12
DEFAULT_ANNUAL_RATE: Final[float] = 0.05
DEFAULT_TERM_YEARS: Final[int] = 5
DEFAULT_TAX_RATE: Final[float] = 0.20


class ConfigurationError(ValueError):
    """Raised when configuration values violate schema expectations."""


class TaxRateValidationError(ConfigurationError):
    """Raised when a tax rate falls outside the inclusive ``[0, 1]`` range."""


def ensure_valid_tax_rate(rate: float) -> float:
    """Return ``rate`` unchanged or raise :class:`TaxRateValidationError`."""

    if 0 <= rate <= 1:
        return rate
    raise TaxRateValidationError("Tax rate must be between 0 and 1")


class ImmutableModel(BaseModel):
    """Base class that freezes instances and rejects unknown fields."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


class ScheduleDisplayConfig(ImmutableModel):
    """Presentation settings for the plain-text amortization report."""

    leading_rows: int = 12
    currency_symbol: str = "$"

    @model_validator(mode="after")
    def _validate_values(self) -> Self:
        if self.leading_rows < 0:
            raise ConfigurationError("Leading schedule rows must be non-negative")
        return self


class CalculatorSettings(ImmutableModel):
    """Process-wide defaults shared by every calculator."""

    default_annual_rate: float = DEFAULT_ANNUAL_RATE
    default_term_years: int = DEFAULT_TERM_YEARS
    months_per_year: int = MONTHS_PER_YEAR
    tax_rate: float = DEFAULT_TAX_RATE
    schedule_display: ScheduleDisplayConfig = Field(default_factory=ScheduleDisplayConfig)

    @field_validator("months_per_year")
    @classmethod
    def _require_monthly_periods(cls, value: int) -> int:
        if value != MONTHS_PER_YEAR:
            raise ConfigurationError(
                f"Only monthly periods are supported (months_per_year={MONTHS_PER_YEAR})"
            )
        return value

    @field_validator("tax_rate")
    @classmethod
    def _validate_tax_rate(cls, value: float) -> float:
        return ensure_valid_tax_rate(value)

    @model_validator(mode="after")
    def _validate_defaults(self) -> Self:
        if self.default_term_years <= 0:
            raise ConfigurationError("Default term must be a positive number of years")
        return self


__all__ = [
    "CalculatorSettings",
    "ConfigurationError",
    "DEFAULT_ANNUAL_RATE",
    "DEFAULT_TAX_RATE",
    "DEFAULT_TERM_YEARS",
    "ImmutableModel",
    "MONTHS_PER_YEAR",
    "ScheduleDisplayConfig",
    "TaxRateValidationError",
    "ensure_valid_tax_rate",
]
