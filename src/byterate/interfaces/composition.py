from __future__ import annotations

import structlog

from byterate.application.use_cases import ConvertRateUseCase
from byterate.infrastructure.config import AppConfig
from byterate.infrastructure.formatting import RateFormatter
from byterate.infrastructure.parsing import ExpressionParser

log = structlog.get_logger(__name__)


def build_use_case(config: AppConfig) -> ConvertRateUseCase:
    """Wire parser and formatter for one conversion run."""
    parser = ExpressionParser(allow_bare_unit=not config.strict_units)
    log.debug("use_case_built", strict_units=config.strict_units)
    return ConvertRateUseCase(parser=parser, formatter=RateFormatter())
