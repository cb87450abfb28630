from .rate import (
    OVERFLOW_UNIT,
    PERIOD_ALIASES,
    PERIODS,
    UNIT_BASE,
    UNITS,
    Period,
    PeriodRate,
    RateExpression,
    RateReport,
    ScaledDisplay,
    period_for_alias,
    unit_multiplier,
)

__all__ = [
    "OVERFLOW_UNIT",
    "PERIOD_ALIASES",
    "PERIODS",
    "UNIT_BASE",
    "UNITS",
    "Period",
    "PeriodRate",
    "RateExpression",
    "RateReport",
    "ScaledDisplay",
    "period_for_alias",
    "unit_multiplier",
]
