"""Error kinds raised while registering, capturing, and emitting sections.

Every error is recoverable by the caller; none of them is raised for a
condition the engine could silently repair without losing user content.
"""

from __future__ import annotations


class SectionError(Exception):
    """Base class for all user-section errors."""

    def __init__(self, message: str, name: str | None = None) -> None:
        super().__init__(message)
        self.name = name


class InvalidSectionName(SectionError):
    """A section name cannot be written into a marker."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Invalid section name {name!r}: use letters, digits and underscores only",
            name,
        )


class DuplicateSection(SectionError):
    """A section name was registered twice, or appears twice in a captured file."""

    def __init__(self, name: str, line: int | None = None, offset: int | None = None) -> None:
        if line is None:
            message = f"Section '{name}' is already defined"
        else:
            message = f"Duplicate user section '{name}' at line {line}"
        super().__init__(message, name)
        self.line = line
        self.offset = offset


class UnterminatedSection(SectionError):
    """A begin marker has no matching end marker.

    ``line`` and ``offset`` point at the offending begin marker.
    """

    def __init__(self, name: str, line: int, offset: int, reason: str | None = None) -> None:
        message = f"Unterminated user section '{name}' (begin marker at line {line})"
        if reason:
            message += f": {reason}"
        super().__init__(message, name)
        self.line = line
        self.offset = offset


class MismatchedSection(UnterminatedSection):
    """An end marker for a different section appeared inside an open section."""

    def __init__(self, name: str, line: int, offset: int, found: str, found_line: int) -> None:
        super().__init__(
            name, line, offset,
            reason=f"found end marker for '{found}' at line {found_line}",
        )
        self.found = found
        self.found_line = found_line


class StrayEndMarker(SectionError):
    """An end marker appeared with no open section."""

    def __init__(self, name: str, line: int, offset: int) -> None:
        super().__init__(
            f"Unexpected end marker for user section '{name}' at line {line}: no matching begin",
            name,
        )
        self.line = line
        self.offset = offset


class UnknownSection(SectionError):
    """A section was resolved or emitted without being registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown user section: '{name}'", name)


class OrphanedSectionWarning(UserWarning):
    """A captured section is not registered in the current pass."""
