"""Marker text for user sections.

On-disk format (stable; files written by older versions must keep
round-tripping):

    /* USER CODE BEGIN <Name> */
    /* USER CODE END <Name> */

Names are restricted to ASCII letters, digits and underscores, so a name
can never contain the whitespace or comment delimiters the marker is built
from. Two different names therefore always give two different markers.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from codegen_sections.sections import BEGIN_KEYWORD, END_KEYWORD, MARKER_PREFIX
from codegen_sections.sections.errors import InvalidSectionName

_NAME_RE = re.compile(r"[A-Za-z0-9_]+")
_PREFIX_WORDS = MARKER_PREFIX.split()


@dataclass(frozen=True)
class MarkerLine:
    """A recognized marker line."""

    kind: str  # BEGIN_KEYWORD or END_KEYWORD
    name: str

    @property
    def is_begin(self) -> bool:
        return self.kind == BEGIN_KEYWORD


def is_valid_name(name: str) -> bool:
    return isinstance(name, str) and _NAME_RE.fullmatch(name) is not None


def check_name(name: str) -> str:
    """Return ``name`` unchanged, or raise InvalidSectionName."""
    if not is_valid_name(name):
        raise InvalidSectionName(name)
    return name


def begin_marker(name: str) -> str:
    """Return the begin marker text for a section (no line terminator)."""
    return f"/* {MARKER_PREFIX} {BEGIN_KEYWORD} {check_name(name)} */"


def end_marker(name: str) -> str:
    """Return the end marker text for a section (no line terminator)."""
    return f"/* {MARKER_PREFIX} {END_KEYWORD} {check_name(name)} */"


def marker_pair(name: str) -> tuple[str, str]:
    return begin_marker(name), end_marker(name)


def parse_marker(line: str) -> MarkerLine | None:
    """Classify a single line of text.

    A line is a marker when, once surrounding whitespace (indentation and
    the line terminator) is stripped, it consists of exactly one marker
    comment. Runs of whitespace between the words are accepted so that
    re-spaced markers are still recognized.

    Args:
        line: One line, with or without its terminator.

    Returns:
        MarkerLine for a begin/end marker, or None for any other line.
    """
    text = line.strip()
    if not (text.startswith("/*") and text.endswith("*/")) or len(text) < 4:
        return None

    words = text[2:-2].split()
    if len(words) != len(_PREFIX_WORDS) + 2:
        return None
    if words[: len(_PREFIX_WORDS)] != _PREFIX_WORDS:
        return None

    kind, name = words[-2], words[-1]
    if kind not in (BEGIN_KEYWORD, END_KEYWORD) or not is_valid_name(name):
        return None
    return MarkerLine(kind=kind, name=name)
