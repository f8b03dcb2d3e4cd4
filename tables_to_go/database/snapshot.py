"""Schema reader backed by a YAML snapshot instead of a live database."""

from __future__ import annotations

from ..shared import SchemaSnapshot, Table
from .base import PreparedStatement, SchemaReader


class SnapshotReader(SchemaReader):
    """Serves tables captured earlier with ``--dump-schema``."""

    def __init__(self, snapshot: SchemaSnapshot) -> None:
        super().__init__(snapshot.scope)
        self.dialect = snapshot.dialect
        self._columns = {table.name: list(table.columns) for table in snapshot.tables}

    def list_base_tables(self) -> list[Table]:
        return [Table(name=name) for name in sorted(self._columns)]

    def prepare_column_query(self) -> PreparedStatement:
        return PreparedStatement("snapshot")

    def load_columns(self, table: Table) -> None:
        table.columns = sorted(
            self._columns.get(table.name, []),
            key=lambda column: column.ordinal_position,
        )
