"""Shared, mutable calculation state: the tax rate and the audit clock.

Both holders guard their value with a lock so that a reader and the validated
setter never interleave. Reads are last-write-visible; nothing here offers a
consistent snapshot across the two holders.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from threading import Lock
from typing import Callable

from fincalc.backend.config import ensure_valid_tax_rate, load_settings

from .calculators.utils import format_percentage

_LOGGER = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TaxConfiguration:
    """Holds the current tax rate, mutable only through :meth:`set_tax_rate`."""

    def __init__(self, tax_rate: float | None = None) -> None:
        initial = load_settings().tax_rate if tax_rate is None else tax_rate
        self._tax_rate = ensure_valid_tax_rate(initial)
        self._lock = Lock()

    @property
    def tax_rate(self) -> float:
        with self._lock:
            return self._tax_rate

    def set_tax_rate(self, rate: float) -> None:
        """Replace the current rate; out-of-range values leave it untouched."""

        validated = ensure_valid_tax_rate(rate)
        with self._lock:
            self._tax_rate = validated
        _LOGGER.info("Tax rate updated to %s", format_percentage(validated))


class CalculationClock:
    """Remembers when the most recent compound-interest calculation ran."""

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._clock = clock or _utc_now
        self._lock = Lock()
        self._last_calculation_at = self._clock()

    @property
    def last_calculation_at(self) -> datetime:
        with self._lock:
            return self._last_calculation_at

    def mark(self) -> datetime:
        """Stamp the current time as the latest calculation and return it."""

        now = self._clock()
        with self._lock:
            self._last_calculation_at = now
        return now


@dataclass
class CalculationContext:
    """Explicit bundle of the state every public calculation may consult."""

    tax: TaxConfiguration = field(default_factory=TaxConfiguration)
    clock: CalculationClock = field(default_factory=CalculationClock)


_default_context: CalculationContext | None = None
_default_context_lock = Lock()


def get_default_context() -> CalculationContext:
    """Return the process-wide context, creating it on first use."""

    global _default_context
    with _default_context_lock:
        if _default_context is None:
            _default_context = CalculationContext()
        return _default_context


def reset_default_context() -> CalculationContext:
    """Discard the process-wide context and rebuild it from the defaults file."""

    global _default_context
    with _default_context_lock:
        _default_context = CalculationContext()
        return _default_context


__all__ = [
    "CalculationClock",
    "CalculationContext",
    "TaxConfiguration",
    "get_default_context",
    "reset_default_context",
]
