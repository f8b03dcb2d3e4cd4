"""PostgreSQL schema reader."""

from __future__ import annotations

from typing import Any, Sequence

import psycopg2

from ..shared import Dialect
from .base import COLUMN_STATEMENT_NAME, InformationSchemaReader


class PostgresSchemaReader(InformationSchemaReader):
    """Reads tables of a PostgreSQL schema; the scope is the schema name."""

    dialect = Dialect.POSTGRES
    driver_error = psycopg2.Error

    tables_sql = """
        SELECT table_name
        FROM information_schema.tables
        WHERE table_type = 'BASE TABLE'
        AND table_schema = %s
        ORDER BY table_name
    """

    prepare_sql = f"""
        PREPARE {COLUMN_STATEMENT_NAME} AS
        SELECT
          ordinal_position,
          column_name,
          data_type,
          column_default,
          is_nullable,
          character_maximum_length,
          numeric_precision
        FROM information_schema.columns
        WHERE table_name = $1
        AND table_schema = $2
        ORDER BY ordinal_position
    """

    deallocate_sql = f"DEALLOCATE {COLUMN_STATEMENT_NAME}"

    def _execute_column_query(self, cursor: Any, table_name: str) -> list[Sequence[Any]]:
        cursor.execute(f"EXECUTE {COLUMN_STATEMENT_NAME} (%s, %s)", (table_name, self.scope))
        return cursor.fetchall()
