"""
Resolved, immutable settings for one generation run.

Raw command line values go through :func:`resolve_settings`, which validates
them and fills in dialect defaults. Everything downstream receives the
frozen :class:`Settings` object instead of reading global state.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .shared import ConfigurationError, Dialect, OutputFormat

DEFAULT_PORTS: Final[dict[Dialect, int]] = {
    Dialect.POSTGRES: 5432,
    Dialect.MYSQL: 3306,
}


@dataclass(frozen=True)
class Settings:
    """Database, output and structable settings."""

    dialect: Dialect = Dialect.POSTGRES
    user: str = "postgres"
    password: str = ""
    database: str = "postgres"
    schema: str = "public"
    host: str = "127.0.0.1"
    port: int = DEFAULT_PORTS[Dialect.POSTGRES]

    output_dir: Path = Path("output")
    output_format: OutputFormat = OutputFormat.CAMEL
    package_name: str = "dto"
    prefix: str = ""
    suffix: str = ""

    structable: bool = False
    structable_only: bool = False
    structable_recorder: bool = False

    verbose: bool = False
    schema_file: Path | None = None
    dump_schema: Path | None = None

    @property
    def structable_enabled(self) -> bool:
        return self.structable or self.structable_only

    @property
    def recorder_enabled(self) -> bool:
        """The recorder is only embedded together with an annotation mode."""
        return self.structable_recorder and self.structable_enabled

    @property
    def scope(self) -> str:
        """The information_schema ``table_schema`` value to filter on."""
        if self.dialect == Dialect.MYSQL:
            return self.database
        return self.schema


def _choice(value: str, enum_type: type, option: str):
    try:
        return enum_type(value)
    except ValueError:
        supported = [member.value for member in enum_type]
        raise ConfigurationError(
            f"{value!r} not supported! {supported}",
            option,
        ) from None


def resolve_output_dir(raw: str | Path) -> Path:
    """Check that the output path exists and is a directory.

    Returns:
        The absolute output directory.

    Raises:
        ConfigurationError: If the path is missing or not a directory.
    """
    path = Path(raw)
    if not path.exists():
        raise ConfigurationError(f"output file path {str(raw)!r} does not exist", "output")
    if not path.is_dir():
        raise ConfigurationError(f"output file path {str(raw)!r} is not a directory", "output")
    return path.resolve()


def resolve_settings(
    *,
    dialect: str = Dialect.POSTGRES.value,
    user: str = "postgres",
    password: str = "",
    database: str = "postgres",
    schema: str = "public",
    host: str = "127.0.0.1",
    port: str | int | None = None,
    output_dir: str | Path = "./output",
    output_format: str = OutputFormat.CAMEL.value,
    package_name: str = "dto",
    prefix: str = "",
    suffix: str = "",
    structable: bool = False,
    structable_only: bool = False,
    structable_recorder: bool = False,
    verbose: bool = False,
    schema_file: str | Path | None = None,
    dump_schema: str | Path | None = None,
) -> Settings:
    """Validate raw option values and build :class:`Settings`.

    Raises:
        ConfigurationError: On an unsupported dialect or output format, an
            invalid output path, an invalid port or an empty package name.
    """
    resolved_dialect = _choice(dialect, Dialect, "type")
    resolved_format = _choice(output_format, OutputFormat, "format")
    resolved_output = resolve_output_dir(output_dir)

    if port in (None, ""):
        resolved_port = DEFAULT_PORTS[resolved_dialect]
    else:
        try:
            resolved_port = int(port)
        except (TypeError, ValueError):
            raise ConfigurationError(f"{port!r} is not a valid port", "port") from None

    if not package_name:
        raise ConfigurationError("name of package can not be empty", "package")

    return Settings(
        dialect=resolved_dialect,
        user=user,
        password=password,
        database=database,
        schema=schema,
        host=host,
        port=resolved_port,
        output_dir=resolved_output,
        output_format=resolved_format,
        package_name=package_name,
        prefix=prefix,
        suffix=suffix,
        structable=structable,
        structable_only=structable_only,
        structable_recorder=structable_recorder,
        verbose=verbose,
        schema_file=Path(schema_file) if schema_file else None,
        dump_schema=Path(dump_schema) if dump_schema else None,
    )
