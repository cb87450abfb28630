from __future__ import annotations

import structlog

from byterate.domain.entities import RateReport
from byterate.domain.exceptions import RateParseError
from byterate.domain.ports import RateFormatterPort, RateParserPort

log = structlog.get_logger(__name__)


class ConvertRateUseCase:
    """Parse a rate expression and spread it over the period table."""

    def __init__(
        self,
        *,
        parser: RateParserPort,
        formatter: RateFormatterPort,
    ) -> None:
        self._parser = parser
        self._formatter = formatter

    def execute(self, expression: str) -> RateReport:
        try:
            parsed = self._parser.parse(expression)
        except RateParseError as e:
            log.info(
                "rate_parse_failed",
                expression=expression,
                category=e.category,
                error=str(e),
            )
            raise

        bytes_per_second = parsed.bytes_per_second
        log.debug(
            "rate_parsed",
            expression=expression,
            bytes_per_second=bytes_per_second,
        )
        return RateReport(
            expression=parsed,
            rates=self._formatter.format(bytes_per_second),
        )
