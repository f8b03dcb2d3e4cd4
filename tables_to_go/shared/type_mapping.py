"""Mapping of SQL column types to Go types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .models import Dialect

# Type families, keyed by the lower-cased ``data_type`` of information_schema.
# First row of each family: postgresql names, second row: additional mysql names.
INTEGER_TYPES: Final[frozenset[str]] = frozenset({
    "integer", "bigint", "bigserial", "smallint", "smallserial", "serial",
    "int", "tinyint", "mediumint",
})
FLOAT_TYPES: Final[frozenset[str]] = frozenset({
    "double precision", "numeric", "decimal", "real",
    "float", "double",
})
STRING_TYPES: Final[frozenset[str]] = frozenset({
    "character varying", "character", "text",
    "char", "varchar", "binary", "varbinary", "blob",
})
TIME_TYPES: Final[frozenset[str]] = frozenset({
    "time", "timestamp", "time with time zone", "time without time zone",
    "timestamp with time zone", "timestamp without time zone",
    "date", "datetime", "year",
})
BOOLEAN_TYPES: Final[frozenset[str]] = frozenset({"boolean"})

# (family, plain Go type, nullable Go type)
_FAMILIES: Final[tuple[tuple[frozenset[str], str, str], ...]] = (
    (INTEGER_TYPES, "int", "sql.NullInt64"),
    (FLOAT_TYPES, "float64", "sql.NullFloat64"),
    (STRING_TYPES, "string", "sql.NullString"),
    (BOOLEAN_TYPES, "bool", "sql.NullBool"),
)

NULL_TIME_TYPES: Final[dict[Dialect, str]] = {
    Dialect.POSTGRES: "pq.NullTime",
    Dialect.MYSQL: "mysql.NullTime",
}

FALLBACK_TYPE: Final[str] = "sql.NullString"

# Package qualifier -> Go import path
GO_IMPORT_PATHS: Final[dict[str, str]] = {
    "sql": "database/sql",
    "time": "time",
    "pq": "github.com/lib/pq",
    "mysql": "github.com/go-sql-driver/mysql",
    "structable": "github.com/Masterminds/structable",
}


@dataclass(frozen=True, slots=True)
class GoType:
    """A Go field type and whether it stems from a date/time column."""

    name: str
    is_time: bool = False

    @property
    def package(self) -> str | None:
        """The package qualifier of the type, e.g. ``sql`` for ``sql.NullBool``."""
        qualifier, dot, _ = self.name.partition(".")
        return qualifier if dot else None

    @property
    def import_path(self) -> str | None:
        package = self.package
        return GO_IMPORT_PATHS.get(package) if package else None


def map_column_type(
    data_type: str,
    is_nullable: bool,
    dialect: Dialect = Dialect.POSTGRES,
) -> GoType:
    """Resolve the Go type for a column.

    Args:
        data_type: The ``data_type`` reported by information_schema.
        is_nullable: Whether the column accepts NULL.
        dialect: Selects the nullable time wrapper of the matching driver.

    Returns:
        The Go type. Unknown SQL types map to ``sql.NullString`` so the
        value is never lost.
    """
    normalized = data_type.strip().lower()

    if normalized in TIME_TYPES:
        name = NULL_TIME_TYPES[Dialect(dialect)] if is_nullable else "time.Time"
        return GoType(name, is_time=True)

    for family, plain, nullable in _FAMILIES:
        if normalized in family:
            return GoType(nullable if is_nullable else plain)

    return GoType(FALLBACK_TYPE)
