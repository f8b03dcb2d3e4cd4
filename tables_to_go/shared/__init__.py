"""Shared utilities for struct generation."""

from .errors import (
    GenerationError,
    ConfigurationError,
    DatabaseConnectionError,
    QueryError,
    PrepareError,
    FileWriteError,
    SnapshotError,
)
from .models import (
    Dialect,
    Column,
    Table,
    is_nullable_flag,
)
from .naming import (
    OutputFormat,
    to_title_case,
    to_camel_case,
    format_identifier,
)
from .schema_loader import (
    SchemaSnapshot,
    dump_schema,
    load_schema,
)
from .type_mapping import (
    GoType,
    map_column_type,
    GO_IMPORT_PATHS,
)

__all__ = [
    # Errors
    "GenerationError",
    "ConfigurationError",
    "DatabaseConnectionError",
    "QueryError",
    "PrepareError",
    "FileWriteError",
    "SnapshotError",
    # Schema entities
    "Dialect",
    "Column",
    "Table",
    "is_nullable_flag",
    # Naming utilities
    "OutputFormat",
    "to_title_case",
    "to_camel_case",
    "format_identifier",
    # Snapshots
    "SchemaSnapshot",
    "dump_schema",
    "load_schema",
    # Type mapping
    "GoType",
    "map_column_type",
    "GO_IMPORT_PATHS",
]
