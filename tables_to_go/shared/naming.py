"""Naming utilities for code generation."""

from __future__ import annotations

from enum import Enum
from functools import lru_cache


class OutputFormat(str, Enum):
    """How table and column names are turned into Go identifiers."""

    CAMEL = "c"
    TITLE = "o"


@lru_cache(maxsize=1024)
def to_title_case(value: str) -> str:
    """Upper-case the first character of a string, keeping the rest.

    Examples:
        >>> to_title_case("user_id")
        'User_id'
        >>> to_title_case("userId")
        'UserId'
    """
    return value[:1].upper() + value[1:]


@lru_cache(maxsize=1024)
def to_camel_case(value: str) -> str:
    """Convert a snake_case string to PascalCase.

    Every underscore separated segment is lower-cased and then capitalized.
    A value without underscores is only title-cased.

    Examples:
        >>> to_camel_case("order_items")
        'OrderItems'
        >>> to_camel_case("USER_ID")
        'UserId'
        >>> to_camel_case("userId")
        'UserId'
    """
    parts = value.split("_")
    if len(parts) == 1:
        return to_title_case(value)
    return "".join(to_title_case(part.lower()) for part in parts)


def format_identifier(value: str, output_format: OutputFormat) -> str:
    """Format a table or column name as an exported Go identifier."""
    if output_format == OutputFormat.CAMEL:
        return to_camel_case(value)
    return to_title_case(value)
