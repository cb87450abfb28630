from .convert_rate import ConvertRateUseCase

__all__ = ["ConvertRateUseCase"]
