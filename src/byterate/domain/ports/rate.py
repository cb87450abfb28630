"""Ports for the parse and format stages of a rate conversion."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from byterate.domain.entities import PeriodRate, RateExpression


@runtime_checkable
class RateParserPort(Protocol):
    """Turns a typed expression into a RateExpression.

    Raises a RateParseError subclass on malformed input.
    """

    def parse(self, text: str) -> RateExpression: ...


@runtime_checkable
class RateFormatterPort(Protocol):
    """Spreads a bytes/second rate over the fixed period table."""

    def format(self, bytes_per_second: float) -> tuple[PeriodRate, ...]: ...
