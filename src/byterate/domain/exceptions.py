"""Rate expression parse errors."""

from __future__ import annotations

from .entities.rate import PERIODS, UNITS

# Character the parser reads once the input is exhausted.
END_OF_INPUT = "\0"


def describe_char(char: str) -> str:
    """Human-readable form of a scanned character ("'/'" or "end of input")."""
    if char == END_OF_INPUT:
        return "end of input"
    return repr(char)


class RateParseError(ValueError):
    """Base class for all rate expression parse errors."""

    category: str = "expression"


class InvalidNumberError(RateParseError):
    """Raised when the magnitude is not a plain decimal number."""

    category = "number"

    def __init__(self) -> None:
        super().__init__("not a valid number")


class InvalidUnitError(RateParseError):
    """Raised when the unit token is not on the byte ladder."""

    category = "unit"

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"not a recognized unit ({' '.join(UNITS)})")


class InvalidPeriodError(RateParseError):
    """Raised when the period token is not a known alias."""

    category = "period"

    def __init__(self, token: str) -> None:
        self.token = token
        names = " ".join(p.name for p in PERIODS)
        super().__init__(f"not a recognized time period ({names})")


class UnexpectedCharacterError(RateParseError):
    """Raised when a required literal (separator, end of input) is missing."""

    category = "separator"

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"expected {describe_char(expected)}, found {describe_char(actual)}"
        )
