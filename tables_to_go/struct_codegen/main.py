"""
Struct Code Generator - Generates Go struct files from database tables.

Each base table of the configured scope becomes one ``<Name>.go`` file
holding a struct whose fields follow the column order of the table. Tables
are read from PostgreSQL, MySQL or a YAML schema snapshot.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Final

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from ..config import Settings, resolve_settings
from ..database import SchemaReader, SnapshotReader, open_connection, reader_for
from ..logger import configure_logging, get_logger
from ..shared import (
    GO_IMPORT_PATHS,
    Column,
    Dialect,
    FileWriteError,
    GenerationError,
    OutputFormat,
    Table,
    dump_schema,
    format_identifier,
    load_schema,
    map_column_type,
)
from .formatting import GoFormatter, SourceFormatError

log = get_logger(__name__)

TEMPLATE_DIR: Final[Path] = Path(__file__).parent / "templates"

GO_FILE_EXTENSION: Final[str] = ".go"
STRUCTABLE_PK_MARKERS: Final[str] = ",PRIMARY_KEY,SERIAL,AUTO_INCREMENT"
STRUCTABLE_RECORDER: Final[str] = "structable.Recorder"


@dataclass(frozen=True, slots=True)
class StructField:
    """One struct field: Go name, Go type and struct tag."""

    name: str
    go_type: str
    tag: str
    column_name: str


@dataclass(frozen=True, slots=True)
class StructSpec:
    """Everything needed to render the Go file of one table."""

    package_name: str
    struct_name: str
    fields: tuple[StructField, ...]
    imports: tuple[str, ...] = ()
    embeds: tuple[str, ...] = ()

    @property
    def file_name(self) -> str:
        return f"{self.struct_name}{GO_FILE_EXTENSION}"

    @property
    def import_groups(self) -> list[list[str]]:
        """Standard library imports first, then third party imports."""
        std = sorted(path for path in self.imports if "." not in path.split("/")[0])
        third_party = sorted(path for path in self.imports if path not in std)
        return [group for group in (std, third_party) if group]


@dataclass
class GeneratorContext:
    """Context for code generation with cached resources."""

    formatter: GoFormatter = field(default_factory=GoFormatter)
    template_env: Environment = field(init=False)

    def __post_init__(self) -> None:
        self.template_env = Environment(
            loader=FileSystemLoader(TEMPLATE_DIR),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
            auto_reload=False,
        )
        self._struct_template = self.template_env.get_template("struct.go.j2")

    @property
    def struct_template(self):
        return self._struct_template


def _structable_annotation(column: Column) -> str:
    """Build the ``stbl`` tag for Masterminds/structable."""
    markers = STRUCTABLE_PK_MARKERS if column.is_serial_primary_key else ""
    return f'stbl:"{column.name}{markers}"'


def _struct_tag(column: Column, settings: Settings) -> str:
    if settings.structable_only:
        return _structable_annotation(column)

    tag = f'db:"{column.name}"'
    if settings.structable:
        tag = f"{tag} {_structable_annotation(column)}"
    return tag


def struct_name_for(table_name: str, settings: Settings) -> str:
    """Go type name (and file stem) for a table, including prefix and suffix."""
    return format_identifier(
        f"{settings.prefix}{table_name}{settings.suffix}",
        settings.output_format,
    )


def build_struct(table: Table, settings: Settings) -> StructSpec:
    """Turn a table with loaded columns into a :class:`StructSpec`.

    Imports are derived from the package qualifiers of the field types, so
    ``database/sql``, ``time`` and the dialect's NullTime package appear only
    when a field needs them.
    """
    fields: list[StructField] = []
    imports: dict[str, None] = {}

    for column in table.ordered_columns():
        go_type = map_column_type(column.data_type, column.is_nullable, settings.dialect)
        if go_type.import_path:
            imports.setdefault(go_type.import_path, None)

        fields.append(
            StructField(
                name=format_identifier(column.name, settings.output_format),
                go_type=go_type.name,
                tag=_struct_tag(column, settings),
                column_name=column.name,
            )
        )

    embeds: list[str] = []
    if settings.recorder_enabled:
        embeds.append(STRUCTABLE_RECORDER)
        imports.setdefault(GO_IMPORT_PATHS["structable"], None)

    return StructSpec(
        package_name=settings.package_name,
        struct_name=struct_name_for(table.name, settings),
        fields=tuple(fields),
        imports=tuple(imports),
        embeds=tuple(embeds),
    )


def render_struct(spec: StructSpec, ctx: GeneratorContext) -> str:
    """Render the Go source of a struct, aligned the way gofmt aligns it."""
    return ctx.struct_template.render(
        package_name=spec.package_name,
        import_groups=spec.import_groups,
        struct_name=spec.struct_name,
        fields=spec.fields,
        name_width=max((len(f.name) for f in spec.fields), default=0),
        type_width=max((len(f.go_type) for f in spec.fields), default=0),
        embeds=spec.embeds,
    )


def write_struct(spec: StructSpec, output_dir: Path, ctx: GeneratorContext) -> Path:
    """Render, format and write a struct file, overwriting an existing one.

    A gofmt failure is not fatal: the rendered source is written instead.

    Raises:
        FileWriteError: If the file cannot be written.
    """
    rendered = render_struct(spec, ctx)

    try:
        source = ctx.formatter.format(rendered)
    except SourceFormatError as e:
        log.warning("gofmt failed for %s, writing unformatted source: %s", spec.file_name, e)
        source = rendered

    output_path = output_dir / spec.file_name
    try:
        output_path.write_text(source, encoding="utf-8")
    except OSError as e:
        raise FileWriteError(f"Failed to write struct file: {e}", str(output_path)) from e

    return output_path


def run(
    reader: SchemaReader,
    settings: Settings,
    ctx: GeneratorContext | None = None,
) -> int:
    """Generate one struct file per base table, one table at a time.

    Any error aborts the run; files written so far are kept.

    Returns:
        Number of struct files written.
    """
    ctx = ctx or GeneratorContext()
    print(f'running for "{settings.dialect.value}"...')

    tables = reader.list_base_tables()
    log.debug("count of tables: %d", len(tables))

    with reader.prepare_column_query():
        for table in tables:
            log.debug("processing table %r", table.name)
            reader.load_columns(table)

            try:
                write_struct(build_struct(table, settings), settings.output_dir, ctx)
            except FileWriteError:
                log.debug("Error at write_struct(%s)", table.name)
                raise

    if settings.dump_schema is not None:
        dump_schema(tables, settings.dump_schema, settings.dialect, reader.scope)
        log.debug("schema snapshot written to %s", settings.dump_schema)

    print("done!")
    return len(tables)


def generate(settings: Settings, ctx: GeneratorContext | None = None) -> int:
    """Generate struct files from a schema snapshot or a live database.

    The connection, when one is opened, is closed whether or not the run
    succeeds.
    """
    ctx = ctx or GeneratorContext()
    if not ctx.formatter.available:
        log.debug("gofmt not found, writing rendered source as is")

    if settings.schema_file is not None:
        snapshot = load_schema(settings.schema_file)
        return run(SnapshotReader(snapshot), replace(settings, dialect=snapshot.dialect), ctx)

    with open_connection(settings) as connection:
        return run(reader_for(settings, connection), settings, ctx)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tables-to-go",
        description="Generate Go structs from the tables of a database",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("-?", "--help", action="help", help="shows help and usage")
    parser.add_argument("-v", "--verbose", action="store_true", help="verbose output")
    parser.add_argument(
        "-t",
        "--type",
        dest="dialect",
        default=Dialect.POSTGRES.value,
        help=f"type of database to use, currently supported: {[d.value for d in Dialect]}",
    )
    parser.add_argument("-u", "--user", default="postgres", help="user to connect to the database")
    parser.add_argument("-p", "--password", default="", help="password of user")
    parser.add_argument("-d", "--database", default="postgres", help="database name")
    parser.add_argument("-s", "--schema", default="public", help="schema name")
    parser.add_argument("-h", "--host", default="127.0.0.1", help="host of database")
    parser.add_argument(
        "-port",
        "--port",
        default=None,
        help="port of database host, defaults to the standard port of the database type",
    )
    parser.add_argument("-of", "--output", default="./output", help="output file path")
    parser.add_argument(
        "-format",
        "--format",
        dest="output_format",
        default=OutputFormat.CAMEL.value,
        help="camelCase (c) or original (o)",
    )
    parser.add_argument("-pre", "--prefix", default="", help="prefix for file- and struct names")
    parser.add_argument("-suf", "--suffix", default="", help="suffix for file- and struct names")
    parser.add_argument("-pn", "--package", default="dto", help="package name")
    parser.add_argument(
        "-st",
        "--structable",
        action="store_true",
        help="generate struct for use in Masterminds/structable",
    )
    parser.add_argument(
        "-sto",
        "--structable-only",
        action="store_true",
        help="generate struct ONLY for use in Masterminds/structable",
    )
    parser.add_argument(
        "-str",
        "--structable-recorder",
        action="store_true",
        help="generate a structable.Recorder (requires -st or -sto)",
    )
    parser.add_argument(
        "--schema-file",
        type=Path,
        default=None,
        help="generate from a YAML schema snapshot instead of a database",
    )
    parser.add_argument(
        "--dump-schema",
        type=Path,
        default=None,
        help="write the introspected schema to a YAML snapshot",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        settings = resolve_settings(
            dialect=args.dialect,
            user=args.user,
            password=args.password,
            database=args.database,
            schema=args.schema,
            host=args.host,
            port=args.port,
            output_dir=args.output,
            output_format=args.output_format,
            package_name=args.package,
            prefix=args.prefix,
            suffix=args.suffix,
            structable=args.structable,
            structable_only=args.structable_only,
            structable_recorder=args.structable_recorder,
            verbose=args.verbose,
            schema_file=args.schema_file,
            dump_schema=args.dump_schema,
        )
        generate(settings)
    except GenerationError as e:
        raise SystemExit(f"Error: {e}") from e


if __name__ == "__main__":
    main()
