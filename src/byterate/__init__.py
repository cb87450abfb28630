"""Convert data-rate expressions into per-period byte rates."""

__version__ = "0.1.0"
