"""Rate entities and the fixed unit / period lookup tables."""

from __future__ import annotations

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

# Byte-multiple ladder, index = power of 1000.
UNITS: tuple[str, ...] = ("B", "KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")
UNIT_BASE = 1000.0

OVERFLOW_UNIT = "NA"


@dataclass(frozen=True)
class Period:
    name: str  # Canonical display name ("sec", "min", ...)
    seconds: int
    aliases: tuple[str, ...]  # Lower-case spellings accepted by the parser


SECOND = Period("sec", 1, ("s", "sec", "second"))
MINUTE = Period("min", 60, ("m", "min", "minute"))
HOUR = Period("hour", 60 * 60, ("h", "hr", "hour"))
DAY = Period("day", 24 * 60 * 60, ("d", "day"))
WEEK = Period("week", 7 * 24 * 60 * 60, ("w", "wk", "week"))
MONTH = Period("month", 30 * 24 * 60 * 60, ("mon", "month"))  # 30 days
YEAR = Period("year", 365 * 24 * 60 * 60, ("y", "yr", "year"))  # 365 days

PERIODS: tuple[Period, ...] = (SECOND, MINUTE, HOUR, DAY, WEEK, MONTH, YEAR)

PERIOD_ALIASES: Mapping[str, Period] = MappingProxyType(
    {alias: period for period in PERIODS for alias in period.aliases}
)

_UNIT_MULTIPLIERS = frozenset(UNIT_BASE**i for i in range(len(UNITS)))
_PERIOD_SECONDS = frozenset(float(p.seconds) for p in PERIODS)


def unit_multiplier(label: str) -> float | None:
    """Return bytes per ``label`` (e.g. "MB" -> 1e6), or None if unknown."""
    try:
        index = UNITS.index(label)
    except ValueError:
        return None
    return UNIT_BASE**index


def period_for_alias(alias: str) -> Period | None:
    """Look up a lower-case period alias ("s", "hr", "month", ...)."""
    return PERIOD_ALIASES.get(alias)


@dataclass(frozen=True)
class RateExpression:
    """Parsed but not yet normalized rate, e.g. ``1.25 MB / s``."""

    magnitude: float
    byte_multiplier: float
    period_seconds: float

    def __post_init__(self) -> None:
        if math.isnan(self.magnitude) or self.magnitude < 0:
            raise ValueError(f"magnitude must be a number >= 0, got {self.magnitude!r}")
        if self.byte_multiplier not in _UNIT_MULTIPLIERS:
            raise ValueError(
                f"byte_multiplier must be a power of 1000 up to YB, got {self.byte_multiplier!r}"
            )
        if self.period_seconds not in _PERIOD_SECONDS:
            raise ValueError(
                f"period_seconds must be a period length, got {self.period_seconds!r}"
            )

    @property
    def bytes_per_second(self) -> float:
        return self.magnitude * self.byte_multiplier / self.period_seconds


@dataclass(frozen=True)
class ScaledDisplay:
    value: float
    unit: str

    @classmethod
    def overflow(cls) -> ScaledDisplay:
        """Sentinel for values past the top of the unit ladder."""
        return cls(math.inf, OVERFLOW_UNIT)

    @property
    def is_overflow(self) -> bool:
        return self.unit == OVERFLOW_UNIT


@dataclass(frozen=True)
class PeriodRate:
    period: Period
    display: ScaledDisplay


@dataclass(frozen=True)
class RateReport:
    expression: RateExpression
    rates: tuple[PeriodRate, ...]

    @property
    def bytes_per_second(self) -> float:
        return self.expression.bytes_per_second
