"""Shared test fixtures for byterate test suite."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator

import pytest

from byterate.application.use_cases import ConvertRateUseCase
from byterate.domain.entities import RateExpression
from byterate.infrastructure.formatting import RateFormatter
from byterate.infrastructure.parsing import ExpressionParser

# ---------------------------------------------------------------------------
# Domain entity fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def one_byte_per_second() -> RateExpression:
    """``1 B / s``"""
    return RateExpression(magnitude=1.0, byte_multiplier=1.0, period_seconds=1.0)


# ---------------------------------------------------------------------------
# Infrastructure / application fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def parser() -> ExpressionParser:
    return ExpressionParser()


@pytest.fixture()
def strict_parser() -> ExpressionParser:
    return ExpressionParser(allow_bare_unit=False)


@pytest.fixture()
def formatter() -> RateFormatter:
    return RateFormatter()


@pytest.fixture()
def use_case(parser: ExpressionParser, formatter: RateFormatter) -> ConvertRateUseCase:
    return ConvertRateUseCase(parser=parser, formatter=formatter)


# ---------------------------------------------------------------------------
# Isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_stdlib_logging() -> Iterator[None]:
    """Drop handlers bound to captured streams once a test is done."""
    yield
    for name in (None, "byterate"):
        logger = logging.getLogger(name)
        logger.handlers.clear()
        logger.setLevel(logging.WARNING)


@pytest.fixture(autouse=True)
def _clean_byterate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep BYTERATE_* variables from the developer's shell out of tests."""
    for name in list(os.environ):
        if name.upper().startswith("BYTERATE_"):
            monkeypatch.delenv(name)
