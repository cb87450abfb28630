from .expression_parser import (
    Cursor,
    ExpressionParser,
    parse_expression,
    parse_number,
    parse_period,
    parse_unit,
)

__all__ = [
    "Cursor",
    "ExpressionParser",
    "parse_expression",
    "parse_number",
    "parse_period",
    "parse_unit",
]
