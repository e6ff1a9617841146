"""Small text helpers shared by the generators."""

from __future__ import annotations

from collections.abc import Iterator


def to_valid_identifier(text: str) -> str:
    """Turn arbitrary text into a C identifier.

    The first character must be a letter or underscore; every character
    that is not alphanumeric or an underscore becomes an underscore.
    """
    if not text:
        return ""
    chars = [c if (c.isalnum() or c == "_") else "_" for c in text]
    if not (chars[0].isalpha() or chars[0] == "_"):
        chars[0] = "_"
    return "".join(chars)


def include_guard(file_name: str) -> str:
    """Include-guard macro for a header file name, e.g. example.h -> EXAMPLE_H."""
    return to_valid_identifier(file_name).upper()


def ensure_ends_with_newline(text: str) -> str:
    return text if text.endswith("\n") else text + "\n"


def iter_lines(text: str) -> Iterator[tuple[int, int, str]]:
    """Yield (line number, start offset, line) for text split on "\\n" only.

    The yielded line excludes the "\\n" but keeps any "\\r". Other Unicode
    line boundaries are not treated as line breaks.
    """
    offset = 0
    for lineno, line in enumerate(text.split("\n"), start=1):
        yield lineno, offset, line
        offset += len(line) + 1
