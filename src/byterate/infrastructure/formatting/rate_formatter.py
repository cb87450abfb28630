"""Spread a bytes/second rate over the fixed period table."""

from __future__ import annotations

import structlog

from byterate.domain.entities import (
    PERIODS,
    UNIT_BASE,
    UNITS,
    PeriodRate,
    ScaledDisplay,
)

log = structlog.get_logger(__name__)


def scale_to_nearest_unit(value: float) -> ScaledDisplay:
    """Scale a byte count to the largest unit that keeps it below 1000.

    Values at or above 1000 YB (and NaN) don't fit the ladder and come
    back as ``ScaledDisplay.overflow()``.
    """
    for unit in UNITS:
        if value < UNIT_BASE:
            return ScaledDisplay(value, unit)
        value /= UNIT_BASE
    return ScaledDisplay.overflow()


def format_rate(bytes_per_second: float) -> tuple[PeriodRate, ...]:
    """One PeriodRate per period, in table order (sec .. year)."""
    return tuple(
        PeriodRate(period, scale_to_nearest_unit(bytes_per_second * period.seconds))
        for period in PERIODS
    )


class RateFormatter:
    """RateFormatterPort implementation backed by format_rate()."""

    def format(self, bytes_per_second: float) -> tuple[PeriodRate, ...]:
        rates = format_rate(bytes_per_second)
        overflowed = [r.period.name for r in rates if r.display.is_overflow]
        if overflowed:
            log.debug("rate_overflow", periods=overflowed)
        return rates
