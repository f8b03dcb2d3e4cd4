"""Schema reader contract and the information_schema based implementation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import closing
from typing import Any, Callable, ClassVar, Sequence

from ..logger import get_logger
from ..shared import Column, Dialect, PrepareError, QueryError, Table, is_nullable_flag

log = get_logger(__name__)

COLUMN_STATEMENT_NAME = "tables_to_go_columns"


def _text(value: Any) -> str | None:
    """Decode driver values that arrive as bytes (mysql information_schema)."""
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8")
    return value if value is None else str(value)


def _int(value: Any) -> int | None:
    return None if value is None else int(value)


def column_from_row(row: Sequence[Any]) -> Column:
    """Normalize a column metadata row.

    Rows hold ordinal_position, column_name, data_type, column_default,
    is_nullable, character_maximum_length and numeric_precision, followed by
    column_key and extra on mysql.
    """
    position, name, data_type, default, nullable, max_length, precision, *extras = row
    column_key = _text(extras[0]) if len(extras) > 0 else None
    extra = _text(extras[1]) if len(extras) > 1 else None

    return Column(
        ordinal_position=int(position),
        name=_text(name) or "",
        data_type=_text(data_type) or "",
        is_nullable=is_nullable_flag(_text(nullable)),
        default=_text(default),
        character_maximum_length=_int(max_length),
        numeric_precision=_int(precision),
        column_key=column_key or "",
        extra=extra or "",
    )


class PreparedStatement:
    """Handle of the server side column query; closing it deallocates it."""

    def __init__(self, name: str, release: Callable[[], None] | None = None) -> None:
        self.name = name
        self._release = release
        self.closed = False

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        if self._release is not None:
            self._release()

    def __enter__(self) -> PreparedStatement:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.close()
        return False


class SchemaReader(ABC):
    """Reads base tables and their columns for one scope."""

    dialect: ClassVar[Dialect]

    def __init__(self, scope: str) -> None:
        self.scope = scope

    @abstractmethod
    def list_base_tables(self) -> list[Table]:
        """Return the base tables of the scope ordered by name, without columns.

        Raises:
            QueryError: If the table listing fails.
        """

    @abstractmethod
    def prepare_column_query(self) -> PreparedStatement:
        """Compile the column query once for the whole run.

        Raises:
            PrepareError: If the statement cannot be compiled.
        """

    @abstractmethod
    def load_columns(self, table: Table) -> None:
        """Replace ``table.columns`` with the columns in ordinal order.

        Raises:
            QueryError: If the column query fails.
            PrepareError: If the column query has not been prepared.
        """


class InformationSchemaReader(SchemaReader):
    """Shared query flow over a DB-API connection.

    Subclasses provide the SQL text, the driver's exception class and the way
    the prepared statement is executed.
    """

    driver_error: ClassVar[type[Exception]] = Exception
    tables_sql: ClassVar[str]
    prepare_sql: ClassVar[str]
    deallocate_sql: ClassVar[str]

    def __init__(self, connection: Any, scope: str) -> None:
        super().__init__(scope)
        self._connection = connection
        self._statement: PreparedStatement | None = None

    def _cursor(self) -> Any:
        return self._connection.cursor()

    @abstractmethod
    def _execute_column_query(self, cursor: Any, table_name: str) -> list[Sequence[Any]]:
        """Run the prepared statement for one table and return its rows."""

    def list_base_tables(self) -> list[Table]:
        try:
            with closing(self._cursor()) as cursor:
                cursor.execute(self.tables_sql, (self.scope,))
                rows = cursor.fetchall()
        except self.driver_error as e:
            log.debug("Error at list_base_tables() for scope %r", self.scope)
            raise QueryError(f"Failed to list base tables: {e}", self.scope) from e

        return [Table(name=_text(row[0]) or "") for row in rows]

    def prepare_column_query(self) -> PreparedStatement:
        try:
            with closing(self._cursor()) as cursor:
                cursor.execute(self.prepare_sql)
        except self.driver_error as e:
            raise PrepareError(f"Failed to prepare column query: {e}", self.scope) from e

        self._statement = PreparedStatement(COLUMN_STATEMENT_NAME, self._deallocate)
        return self._statement

    def _deallocate(self) -> None:
        try:
            with closing(self._cursor()) as cursor:
                cursor.execute(self.deallocate_sql)
        except self.driver_error as e:
            log.warning("Could not deallocate %s: %s", COLUMN_STATEMENT_NAME, e)

    def load_columns(self, table: Table) -> None:
        if self._statement is None or self._statement.closed:
            raise PrepareError("column query has not been prepared", self.scope)

        try:
            with closing(self._cursor()) as cursor:
                rows = self._execute_column_query(cursor, table.name)
        except self.driver_error as e:
            log.debug("Error at load_columns(%s) for scope %r", table.name, self.scope)
            raise QueryError(
                f"Failed to load columns of table {table.name!r}: {e}",
                self.scope,
            ) from e

        table.columns = [column_from_row(row) for row in rows]
