"""Custom exceptions for struct generation."""

from __future__ import annotations


class GenerationError(Exception):
    """Base exception for all errors that abort a generation run."""

    def __init__(self, message: str, context: str | None = None) -> None:
        self.context = context
        full_message = f"{message}" if not context else f"[{context}] {message}"
        super().__init__(full_message)


class ConfigurationError(GenerationError):
    """Raised when command line settings are invalid."""

    def __init__(self, message: str, option: str | None = None) -> None:
        self.option = option
        if option:
            message = f"Option '{option}': {message}"
        super().__init__(message)


class DatabaseConnectionError(GenerationError):
    """Raised when the database cannot be reached or rejects the login."""

    def __init__(
        self,
        dialect: str,
        user: str,
        database: str,
        host: str,
        port: int,
        using_password: bool,
    ) -> None:
        self.dialect = dialect
        self.using_password = using_password
        super().__init__(
            f"Connection to database (type={dialect!r}, user={user!r}, "
            f"database={database!r}, host='{host}:{port}' "
            f"(using password: {'yes' if using_password else 'no'})) failed"
        )


class QueryError(GenerationError):
    """Raised when a metadata query cannot be executed."""

    def __init__(self, message: str, scope: str) -> None:
        self.scope = scope
        super().__init__(message, f"scope {scope!r}")


class PrepareError(GenerationError):
    """Raised when the column metadata statement cannot be prepared."""

    def __init__(self, message: str, scope: str) -> None:
        self.scope = scope
        super().__init__(message, f"scope {scope!r}")


class FileWriteError(GenerationError):
    """Raised when a generated file cannot be written."""

    def __init__(self, message: str, path: str) -> None:
        self.path = path
        super().__init__(message, path)


class SnapshotError(GenerationError):
    """Raised when a schema snapshot file is unreadable or malformed."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        super().__init__(message, path)
