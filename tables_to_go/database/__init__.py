"""Schema readers for PostgreSQL, MySQL and YAML snapshots."""

from .base import (
    COLUMN_STATEMENT_NAME,
    InformationSchemaReader,
    PreparedStatement,
    SchemaReader,
    column_from_row,
)
from .connection import open_connection, reader_for
from .mysql_reader import MySQLSchemaReader
from .postgres_reader import PostgresSchemaReader
from .snapshot import SnapshotReader

__all__ = [
    "COLUMN_STATEMENT_NAME",
    "InformationSchemaReader",
    "PreparedStatement",
    "SchemaReader",
    "column_from_row",
    "open_connection",
    "reader_for",
    "MySQLSchemaReader",
    "PostgresSchemaReader",
    "SnapshotReader",
]
