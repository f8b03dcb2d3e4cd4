"""Opening database connections and picking the matching schema reader."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator

import mysql.connector
import psycopg2

from ..config import Settings
from ..logger import get_logger
from ..shared import DatabaseConnectionError, Dialect
from .base import InformationSchemaReader, SchemaReader
from .mysql_reader import MySQLSchemaReader
from .postgres_reader import PostgresSchemaReader

log = get_logger(__name__)

_READERS: dict[Dialect, type[InformationSchemaReader]] = {
    Dialect.POSTGRES: PostgresSchemaReader,
    Dialect.MYSQL: MySQLSchemaReader,
}


def _connect(settings: Settings) -> Any:
    if settings.dialect == Dialect.MYSQL:
        return mysql.connector.connect(
            host=settings.host,
            port=settings.port,
            user=settings.user,
            password=settings.password,
            database=settings.database,
        )

    connection = psycopg2.connect(
        host=settings.host,
        port=settings.port,
        user=settings.user,
        password=settings.password,
        dbname=settings.database,
        sslmode="disable",
    )
    # Metadata reads only; keeps failed statements from poisoning the session
    connection.autocommit = True
    return connection


def _connection_error(settings: Settings) -> DatabaseConnectionError:
    return DatabaseConnectionError(
        dialect=settings.dialect.value,
        user=settings.user,
        database=settings.database,
        host=settings.host,
        port=settings.port,
        using_password=bool(settings.password),
    )


@contextmanager
def open_connection(settings: Settings) -> Iterator[Any]:
    """Connect to the configured database and close it when the block exits.

    Raises:
        DatabaseConnectionError: If the connection cannot be established.
            The password is never part of the message.
    """
    log.debug(
        "Connecting to %s at %s:%s as %r",
        settings.dialect.value, settings.host, settings.port, settings.user,
    )
    try:
        connection = _connect(settings)
    except (psycopg2.Error, mysql.connector.Error) as e:
        log.debug("Driver reported: %s", e)
        raise _connection_error(settings) from None

    try:
        yield connection
    finally:
        try:
            connection.close()
            log.debug("Database connection closed.")
        except (psycopg2.Error, mysql.connector.Error) as e:
            log.warning("Closing the database connection failed: %s", e)


def reader_for(settings: Settings, connection: Any) -> SchemaReader:
    """Return the schema reader of the configured dialect."""
    reader_class = _READERS[settings.dialect]
    return reader_class(connection, settings.scope)
