"""Normalizing generated Go source with gofmt."""

from __future__ import annotations

import shutil
import subprocess

_UNSET = object()


class SourceFormatError(Exception):
    """Raised when gofmt rejects or cannot process the source."""


class GoFormatter:
    """Runs ``gofmt`` over source text.

    Without a ``gofmt`` executable the source is returned unchanged.
    """

    def __init__(self, executable: str | None | object = _UNSET) -> None:
        if executable is _UNSET:
            executable = shutil.which("gofmt")
        self.executable: str | None = executable  # type: ignore[assignment]

    @property
    def available(self) -> bool:
        return self.executable is not None

    def format(self, source: str) -> str:
        """Return the gofmt-normalized source.

        Raises:
            SourceFormatError: If gofmt cannot be run or exits with an error.
        """
        if self.executable is None:
            return source

        try:
            result = subprocess.run(
                [self.executable],
                input=source,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            raise SourceFormatError(f"could not run {self.executable}: {e}") from e

        if result.returncode != 0:
            raise SourceFormatError(result.stderr.strip() or f"exit status {result.returncode}")

        return result.stdout
