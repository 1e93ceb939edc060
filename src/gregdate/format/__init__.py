"""Parsing and formatting of dates through letter-token patterns."""

from .pattern import (
    DEFAULT_PATTERN,
    ISO_PATTERN,
    CompiledPattern,
    ParsedFields,
    compile_pattern,
    format_fields,
    parse,
)

__all__ = [
    "DEFAULT_PATTERN",
    "ISO_PATTERN",
    "CompiledPattern",
    "ParsedFields",
    "compile_pattern",
    "format_fields",
    "parse",
]
