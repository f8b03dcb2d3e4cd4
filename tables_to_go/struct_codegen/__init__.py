"""Struct Code Generator - Generates Go structs from database tables."""

from .formatting import GoFormatter, SourceFormatError
from .main import (
    StructField,
    StructSpec,
    GeneratorContext,
    build_struct,
    render_struct,
    write_struct,
    run,
    generate,
    main,
)

__all__ = [
    "GoFormatter",
    "SourceFormatError",
    "StructField",
    "StructSpec",
    "GeneratorContext",
    "build_struct",
    "render_struct",
    "write_struct",
    "run",
    "generate",
    "main",
]
