"""Hardcoded default configuration values."""

from __future__ import annotations

from typing import Any

DEFAULT_CONFIG: dict[str, Any] = {
    "app_name": "byterate",
    "environment": "dev",
    "logging": {
        "level": "WARNING",
        "format": None,  # Derived from environment in schema.py
    },
    "parser": {
        "strict_units": False,
    },
    "display": {
        "precision": 3,
        "value_width": 7,
        "unit_width": 2,
    },
}
