"""Plain-text rendering of rate reports and usage."""

from __future__ import annotations

from byterate.domain.entities import PERIODS, UNITS, PeriodRate, RateReport


def render_line(
    rate: PeriodRate,
    *,
    precision: int = 3,
    value_width: int = 7,
    unit_width: int = 2,
) -> str:
    """``  3.600 KB / hour``"""
    display = rate.display
    return (
        f"{display.value:>{value_width}.{precision}f} "
        f"{display.unit:>{unit_width}} / {rate.period.name}"
    )


def render_lines(
    report: RateReport,
    *,
    precision: int = 3,
    value_width: int = 7,
    unit_width: int = 2,
) -> list[str]:
    return [
        render_line(
            rate,
            precision=precision,
            value_width=value_width,
            unit_width=unit_width,
        )
        for rate in report.rates
    ]


def render_usage(prog: str) -> str:
    return "\n".join(
        [
            f"Usage: {prog} <number> <unit> / <period>",
            "       <number>: integer or float (no scientific notation)",
            f"       <unit>  : {' '.join(UNITS)}",
            f"       <period>: {' '.join(p.name for p in PERIODS)}",
        ]
    )
