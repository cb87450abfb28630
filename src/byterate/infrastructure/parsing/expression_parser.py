"""Recursive-descent parser for rate expressions like ``1.25 MB / s``.

Grammar (ASCII whitespace allowed around every token)::

    expr   := number unit? '/' period
    number := digit+ ('.' digit+)?
    unit   := letter+      # matched upper-cased against the unit ladder
    period := letter+      # matched lower-cased against the period aliases

Each sub-parse consumes the longest run of its character class, then checks
the token. There is no backtracking and no error recovery.
"""

from __future__ import annotations

import string

import structlog

from byterate.domain.entities import RateExpression, period_for_alias, unit_multiplier
from byterate.domain.exceptions import (
    END_OF_INPUT,
    InvalidNumberError,
    InvalidPeriodError,
    InvalidUnitError,
    UnexpectedCharacterError,
)

log = structlog.get_logger(__name__)

_DIGITS = frozenset(string.digits)
_LETTERS = frozenset(string.ascii_letters)
# ASCII whitespace, vertical tab excluded.
_WHITESPACE = frozenset(" \t\n\r\x0c")

SEPARATOR = "/"


class Cursor:
    """Read position into one input string.

    Reading past the end yields END_OF_INPUT and never moves the position.
    """

    __slots__ = ("text", "pos")

    def __init__(self, text: str, pos: int = 0) -> None:
        self.text = text
        self.pos = pos

    def peek(self) -> str:
        if self.pos >= len(self.text):
            return END_OF_INPUT
        return self.text[self.pos]

    def eof(self) -> bool:
        # A literal NUL in the text is still input.
        return self.pos >= len(self.text)

    def advance(self) -> str:
        if self.eof():
            return END_OF_INPUT
        char = self.text[self.pos]
        self.pos += 1
        return char

    def expect(self, expected: str) -> str:
        actual = self.advance()
        if actual != expected:
            raise UnexpectedCharacterError(expected=expected, actual=actual)
        return actual

    def skip_whitespace(self) -> None:
        while not self.eof() and self.peek() in _WHITESPACE:
            self.advance()

    def take_while(self, allowed: frozenset[str]) -> str:
        """Consume and return the maximal prefix made of ``allowed`` chars."""
        start = self.pos
        while not self.eof() and self.peek() in allowed:
            self.advance()
        return self.text[start : self.pos]


def parse_number(cursor: Cursor) -> float:
    """Parse ``digit+ ('.' digit+)?`` at the cursor."""
    start = cursor.pos
    if not cursor.take_while(_DIGITS):
        raise InvalidNumberError()

    if cursor.peek() == ".":
        cursor.advance()
        if not cursor.take_while(_DIGITS):
            raise InvalidNumberError()

    return float(cursor.text[start : cursor.pos])


def parse_unit(cursor: Cursor, *, allow_bare: bool = True) -> float:
    """Parse a unit label and return bytes per unit ("MB" -> 1e6).

    An absent label means plain bytes unless ``allow_bare`` is false.
    """
    token = cursor.take_while(_LETTERS)
    if not token and allow_bare:
        return 1.0

    multiplier = unit_multiplier(token.upper())
    if multiplier is None:
        raise InvalidUnitError(token)
    return multiplier


def parse_period(cursor: Cursor) -> float:
    """Parse a period alias and return its length in seconds."""
    token = cursor.take_while(_LETTERS)
    period = period_for_alias(token.lower())
    if period is None:
        raise InvalidPeriodError(token)
    return float(period.seconds)


def parse_expression(text: str, *, allow_bare_unit: bool = True) -> RateExpression:
    """Parse a full rate expression.

    Raises:
        RateParseError: A subclass naming the offending category.
    """
    cursor = Cursor(text)

    cursor.skip_whitespace()
    magnitude = parse_number(cursor)
    cursor.skip_whitespace()
    multiplier = parse_unit(cursor, allow_bare=allow_bare_unit)
    cursor.skip_whitespace()
    cursor.expect(SEPARATOR)
    cursor.skip_whitespace()
    seconds = parse_period(cursor)
    cursor.skip_whitespace()
    if not cursor.eof():
        raise UnexpectedCharacterError(expected=END_OF_INPUT, actual=cursor.peek())

    return RateExpression(
        magnitude=magnitude,
        byte_multiplier=multiplier,
        period_seconds=seconds,
    )


class ExpressionParser:
    """RateParserPort implementation backed by parse_expression()."""

    def __init__(self, *, allow_bare_unit: bool = True) -> None:
        self.allow_bare_unit = allow_bare_unit

    def parse(self, text: str) -> RateExpression:
        expression = parse_expression(text, allow_bare_unit=self.allow_bare_unit)
        log.debug(
            "expression_parsed",
            text=text,
            magnitude=expression.magnitude,
            byte_multiplier=expression.byte_multiplier,
            period_seconds=expression.period_seconds,
        )
        return expression
