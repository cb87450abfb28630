from .rate_formatter import RateFormatter, format_rate, scale_to_nearest_unit

__all__ = ["RateFormatter", "format_rate", "scale_to_nearest_unit"]
