"""MySQL schema reader."""

from __future__ import annotations

from typing import Any, Sequence

import mysql.connector

from ..shared import Dialect
from .base import COLUMN_STATEMENT_NAME, InformationSchemaReader

_TABLE_VARIABLE = "@tables_to_go_table"
_SCOPE_VARIABLE = "@tables_to_go_scope"


class MySQLSchemaReader(InformationSchemaReader):
    """Reads tables of a MySQL database; the scope is the database name.

    Server side prepared statements only take session variables as
    arguments, so the table and scope are bound with ``SET`` first.
    """

    dialect = Dialect.MYSQL
    driver_error = mysql.connector.Error

    tables_sql = """
        SELECT table_name
        FROM information_schema.tables
        WHERE table_type = 'BASE TABLE'
        AND table_schema = %s
        ORDER BY table_name
    """

    prepare_sql = f"""
        PREPARE {COLUMN_STATEMENT_NAME} FROM '
        SELECT
          ordinal_position,
          column_name,
          data_type,
          column_default,
          is_nullable,
          character_maximum_length,
          numeric_precision,
          column_key,
          extra
        FROM information_schema.columns
        WHERE table_name = ?
        AND table_schema = ?
        ORDER BY ordinal_position
        '
    """

    deallocate_sql = f"DEALLOCATE PREPARE {COLUMN_STATEMENT_NAME}"

    def _cursor(self) -> Any:
        return self._connection.cursor(buffered=True)

    def _execute_column_query(self, cursor: Any, table_name: str) -> list[Sequence[Any]]:
        cursor.execute(
            f"SET {_TABLE_VARIABLE} = %s, {_SCOPE_VARIABLE} = %s",
            (table_name, self.scope),
        )
        cursor.execute(
            f"EXECUTE {COLUMN_STATEMENT_NAME} USING {_TABLE_VARIABLE}, {_SCOPE_VARIABLE}"
        )
        return cursor.fetchall()
