from .rate import RateFormatterPort, RateParserPort

__all__ = ["RateFormatterPort", "RateParserPort"]
