"""Runtime settings.

Uses environment variables when available, falls back to conventional
defaults.

Environment variables:
    CODEGEN_SECTIONS_ENCODING: encoding for reading and writing generated files (default: utf-8)
    CODEGEN_SECTIONS_INDENT: spaces per indentation level for CodeWriter (default: 4)
"""

from __future__ import annotations

import os
import warnings

_DEFAULT_ENCODING = "utf-8"
_DEFAULT_INDENT = 4


def file_encoding() -> str:
    """Return the encoding used for generated files."""
    return os.environ.get("CODEGEN_SECTIONS_ENCODING") or _DEFAULT_ENCODING


def indent_size() -> int:
    """Return the number of spaces per indentation level."""
    raw = os.environ.get("CODEGEN_SECTIONS_INDENT")
    if not raw:
        return _DEFAULT_INDENT
    try:
        value = int(raw)
    except ValueError:
        warnings.warn(f"Ignoring CODEGEN_SECTIONS_INDENT={raw!r}: not an integer")
        return _DEFAULT_INDENT
    if value < 0:
        warnings.warn(f"Ignoring CODEGEN_SECTIONS_INDENT={raw!r}: negative")
        return _DEFAULT_INDENT
    return value
