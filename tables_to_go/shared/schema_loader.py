"""Reading and writing YAML snapshots of introspected schemas."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Sequence

import yaml

from .errors import SnapshotError
from .models import Column, Dialect, Table, is_nullable_flag


@dataclass(frozen=True, slots=True)
class SchemaSnapshot:
    """Tables of one scope as captured from a live database."""

    dialect: Dialect
    scope: str
    tables: list[Table] = field(default_factory=list)


def _table_to_dict(table: Table) -> dict[str, Any]:
    return {
        "name": table.name,
        "columns": [asdict(column) for column in table.ordered_columns()],
    }


def dump_schema(
    tables: Sequence[Table],
    path: Path,
    dialect: Dialect,
    scope: str,
) -> None:
    """Write the given tables to a YAML snapshot file.

    Raises:
        SnapshotError: If the file cannot be written.
    """
    data = {
        "dialect": Dialect(dialect).value,
        "scope": scope,
        "tables": [_table_to_dict(table) for table in tables],
    }
    try:
        path.write_text(
            yaml.safe_dump(data, sort_keys=False, allow_unicode=True),
            encoding="utf-8",
        )
    except OSError as e:
        raise SnapshotError(f"Failed to write schema snapshot: {e}", str(path)) from e


def _column_from_dict(raw: Any, table_name: str, path: Path) -> Column:
    if not isinstance(raw, dict):
        raise SnapshotError(f"Column entries of '{table_name}' must be mappings", str(path))

    missing = [key for key in ("ordinal_position", "name", "data_type") if key not in raw]
    if missing:
        raise SnapshotError(
            f"Column of '{table_name}' is missing {', '.join(missing)}",
            str(path),
        )

    default = raw.get("default")
    return Column(
        ordinal_position=int(raw["ordinal_position"]),
        name=str(raw["name"]),
        data_type=str(raw["data_type"]),
        is_nullable=is_nullable_flag(raw.get("is_nullable", False)),
        default=None if default is None else str(default),
        character_maximum_length=raw.get("character_maximum_length"),
        numeric_precision=raw.get("numeric_precision"),
        column_key=str(raw.get("column_key") or ""),
        extra=str(raw.get("extra") or ""),
    )


def load_schema(path: Path) -> SchemaSnapshot:
    """Load and validate a schema snapshot from a YAML file.

    Args:
        path: Path to the snapshot file.

    Returns:
        The snapshot with tables in file order.

    Raises:
        SnapshotError: If the file cannot be read or is malformed.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SnapshotError(f"Failed to read schema snapshot: {e}", str(path)) from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise SnapshotError(f"Invalid YAML: {e}", str(path)) from e

    if not isinstance(data, dict):
        raise SnapshotError("Snapshot root must be a mapping", str(path))

    try:
        dialect = Dialect(str(data.get("dialect", Dialect.POSTGRES.value)))
    except ValueError as e:
        raise SnapshotError(f"Unsupported dialect {data.get('dialect')!r}", str(path)) from e

    raw_tables = data.get("tables")
    if not isinstance(raw_tables, list):
        raise SnapshotError("Snapshot must provide a 'tables' list", str(path))

    tables: list[Table] = []
    for raw_table in raw_tables:
        if not isinstance(raw_table, dict) or "name" not in raw_table:
            raise SnapshotError("Every table needs a 'name'", str(path))
        name = str(raw_table["name"])
        columns = [
            _column_from_dict(raw, name, path)
            for raw in raw_table.get("columns") or []
        ]
        tables.append(Table(name=name, columns=columns))

    return SchemaSnapshot(
        dialect=dialect,
        scope=str(data.get("scope", "")),
        tables=tables,
    )
