"""Normalized schema entities shared by the readers and the emitter."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Dialect(str, Enum):
    """Supported database dialects, keyed by their command line value."""

    POSTGRES = "pg"
    MYSQL = "mysql"


@dataclass(frozen=True, slots=True)
class Column:
    """A column as reported by ``information_schema.columns``."""

    ordinal_position: int
    name: str
    data_type: str
    is_nullable: bool
    default: str | None = None
    character_maximum_length: int | None = None
    numeric_precision: int | None = None
    # MySQL only
    column_key: str = ""
    extra: str = ""

    @property
    def is_serial_primary_key(self) -> bool:
        """True for sequence backed (pg) or auto_increment (mysql) keys."""
        if self.default and "nextval" in self.default:
            return True
        return "PRI" in self.column_key and "auto_increment" in self.extra


@dataclass(slots=True)
class Table:
    """A base table; ``columns`` is filled in by a second metadata query."""

    name: str
    columns: list[Column] = field(default_factory=list)

    def ordered_columns(self) -> list[Column]:
        return sorted(self.columns, key=lambda column: column.ordinal_position)


def is_nullable_flag(value: str | bool | None) -> bool:
    """Convert an ``is_nullable`` value ("YES"/"NO") to a bool."""
    if isinstance(value, bool):
        return value
    return (value or "").strip().upper() == "YES"
